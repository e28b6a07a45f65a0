"""Tests for the Streak API credential."""
from unittest.mock import patch

from requests.exceptions import ConnectionError

from nodepacks.streak.credentials import StreakApiCredential

from conftest import API_KEY, make_response


class TestStreakApiCredential:

    def test_validate_requires_api_key(self):
        result = StreakApiCredential({}).validate()

        assert result["valid"] is False
        assert "API Key" in result["message"]

    @patch('requests.request')
    def test_missing_key_fails_without_request(self, mock_request):
        result = StreakApiCredential({"apiKey": ""}).test()

        assert result["success"] is False
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_successful_connection(self, mock_request):
        mock_request.return_value = make_response({"email": "me@example.com"})

        result = StreakApiCredential({"apiKey": API_KEY}).test()

        assert result == {
            "success": True,
            "message": "Successfully connected to Streak API as me@example.com",
        }
        kwargs = mock_request.call_args[1]
        assert kwargs["url"] == "https://api.streak.com/api/v1/users/me"
        assert kwargs["auth"] == (API_KEY, "")

    @patch('requests.request')
    def test_rejected_key(self, mock_request):
        mock_request.return_value = make_response({"error": "Invalid API key"}, status_code=401)

        result = StreakApiCredential({"apiKey": "wrong"}).test()

        assert result == {"success": False, "message": "Invalid API key - authentication failed"}

    @patch('requests.request')
    def test_unreachable_server(self, mock_request):
        mock_request.side_effect = ConnectionError("down")

        result = StreakApiCredential({"apiKey": API_KEY}).test()

        assert result["success"] is False
        assert "Streak API error" in result["message"]

    def test_definition(self):
        definition = StreakApiCredential.get_definition()

        assert definition["name"] == "streakApi"
        assert [p["name"] for p in definition["properties"]] == ["apiKey"]
