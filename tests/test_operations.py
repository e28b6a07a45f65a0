"""Tests for the user, team, pipeline, box, stage and field handlers."""
from unittest.mock import patch

import pytest

from node_sdk.basenode import NodeValidationError, UnsupportedOperationError

from conftest import make_response


BASE = "https://api.streak.com/api"


def _call(mock_request, index=-1):
    return mock_request.call_args_list[index][1]


class TestUserAndTeam:

    @patch('requests.request')
    def test_get_current_user(self, mock_request, run_operation):
        mock_request.return_value = make_response({"email": "me@example.com"})

        result = run_operation("user", "getCurrentUser", {})

        assert result == {"email": "me@example.com"}
        assert _call(mock_request)["url"] == f"{BASE}/v1/users/me"

    @patch('requests.request')
    def test_get_user_requires_key(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="Parameter userKey is required for this operation"):
            run_operation("user", "getUser", {"userKey": ""})
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_get_my_teams_reads_teams_from_user(self, mock_request, run_operation):
        mock_request.return_value = make_response({"email": "me@example.com", "teams": [{"key": "t1"}]})

        result = run_operation("team", "getMyTeams", {})

        assert result == [{"key": "t1"}]
        assert mock_request.call_count == 1
        assert _call(mock_request)["url"] == f"{BASE}/v2/users/me"

    @patch('requests.request')
    def test_get_my_teams_falls_back_to_teams_listing(self, mock_request, run_operation):
        mock_request.side_effect = [
            make_response({"email": "me@example.com"}),
            make_response([{"results": [{"key": "t1", "name": "Sales"}, {"key": "t2", "name": "Ops"}]}]),
        ]

        result = run_operation("team", "getMyTeams", {})

        assert [t["key"] for t in result] == ["t1", "t2"]
        assert _call(mock_request, 0)["url"] == f"{BASE}/v2/users/me"
        assert _call(mock_request, 1)["url"] == f"{BASE}/v2/users/me/teams"

    @patch('requests.request')
    def test_get_team_is_v2(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "t1"})

        run_operation("team", "getTeam", {"teamKey": "t1"})

        assert _call(mock_request)["url"] == f"{BASE}/v2/teams/t1"


class TestPipeline:

    @patch('requests.request')
    def test_list_all_pipelines_honours_limit(self, mock_request, run_operation):
        mock_request.return_value = make_response([{"key": f"p{i}"} for i in range(5)])

        result = run_operation("pipeline", "listAllPipelines", {"returnAll": False, "limit": 2})

        assert [p["key"] for p in result] == ["p0", "p1"]

    @patch('requests.request')
    def test_list_all_pipelines_return_all(self, mock_request, run_operation):
        mock_request.return_value = make_response([{"key": f"p{i}"} for i in range(5)])

        result = run_operation("pipeline", "listAllPipelines", {"returnAll": True, "limit": 2})

        assert len(result) == 5

    @patch('requests.request')
    def test_get_pipeline_unwraps_resource_locator(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "abc"})

        run_operation("pipeline", "getPipeline", {"pipelineKey": {"mode": "list", "value": "abc"}})

        assert _call(mock_request)["url"] == f"{BASE}/v1/pipelines/abc"

    @patch('requests.request')
    def test_create_pipeline_is_form_encoded(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "p1"})

        run_operation(
            "pipeline",
            "createPipeline",
            {
                "pipelineName": "Sales",
                "teamKey": "team1",
                "additionalFields": {"stageNames": "Lead,Won", "teamWide": True},
            },
        )

        kwargs = _call(mock_request)
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == f"{BASE}/v1/pipelines"
        assert kwargs["data"] == {
            "name": "Sales",
            "teamKey": "team1",
            "stageNames": "Lead,Won",
            "teamWide": "true",
        }

    @patch('requests.request')
    def test_create_pipeline_requires_name(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="pipelineName"):
            run_operation("pipeline", "createPipeline", {})
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_update_pipeline(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "p1"})

        run_operation(
            "pipeline",
            "updatePipeline",
            {"pipelineKey": "p1", "pipelineName": "New", "updateFields": {"description": "d"}},
        )

        kwargs = _call(mock_request)
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {"name": "New", "description": "d"}

    @patch('requests.request')
    def test_move_boxes_batch_accepts_comma_string(self, mock_request, run_operation):
        mock_request.return_value = make_response([])

        run_operation(
            "pipeline",
            "moveBoxesBatch",
            {"pipelineKey": "p1", "boxKeys": "b1, b2,", "targetPipelineKey": "p2"},
        )

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v2/pipelines/p1/boxes/batch"
        assert kwargs["json"] == [
            {"key": "b1", "boxKey": "b1", "pipelineKey": "p2"},
            {"key": "b2", "boxKey": "b2", "pipelineKey": "p2"},
        ]

    @patch('requests.request')
    def test_move_boxes_batch_requires_boxes(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="boxKeys"):
            run_operation(
                "pipeline",
                "moveBoxesBatch",
                {"pipelineKey": "p1", "boxKeys": " , ", "targetPipelineKey": "p2"},
            )
        assert mock_request.call_count == 0

    def test_unsupported_operation(self, run_operation):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            run_operation("pipeline", "archivePipeline", {})

        assert str(exc_info.value) == 'The pipeline operation "archivePipeline" is not supported!'
        assert exc_info.value.resource == "pipeline"
        assert exc_info.value.operation == "archivePipeline"


class TestBox:

    @patch('requests.request')
    def test_list_boxes_single_call_with_limit(self, mock_request, run_operation):
        mock_request.return_value = make_response([{"key": "b1"}])

        run_operation(
            "box",
            "listBoxes",
            {"pipelineKey": "p1", "returnAll": False, "limit": 10, "stageKeyFilter": "s1"},
        )

        kwargs = _call(mock_request)
        assert mock_request.call_count == 1
        assert kwargs["url"] == f"{BASE}/v2/pipelines/p1/boxes"
        assert kwargs["params"] == {"limit": 10, "stageKey": "s1"}

    @patch('requests.request')
    def test_list_boxes_return_all_paginates(self, mock_request, run_operation):
        mock_request.side_effect = [
            make_response([{"key": f"b{i}"} for i in range(100)]),
            make_response([{"key": "last"}]),
        ]

        result = run_operation("box", "listBoxes", {"pipelineKey": "p1", "returnAll": True, "limit": 100})

        assert len(result) == 101
        assert mock_request.call_count == 2
        assert _call(mock_request, 1)["params"] == {"page": 1, "limit": 100}
        assert "stageKey" not in _call(mock_request, 0)["params"]

    @patch('requests.request')
    def test_get_multiple_boxes(self, mock_request, run_operation):
        mock_request.return_value = make_response([{"key": "b1"}, {"key": "b2"}])

        run_operation("box", "getMultipleBoxes", {"boxKeys": ["b1", "b2"]})

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v1/boxes/batchGet"
        assert kwargs["json"] == {"boxKeys": ["b1", "b2"]}

    @patch('requests.request')
    def test_create_box(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "b1"})

        run_operation(
            "box",
            "createBox",
            {
                "pipelineKey": "p1",
                "boxName": "Acme deal",
                "stageKey": {"mode": "id", "value": "5001"},
                "additionalFields": {"notes": "hot lead"},
            },
        )

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v2/pipelines/p1/boxes"
        assert kwargs["json"] == {"name": "Acme deal", "stageKey": "5001", "notes": "hot lead"}

    @patch('requests.request')
    def test_update_box_requires_fields(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="At least one field to update must be specified"):
            run_operation("box", "updateBox", {"boxKey": "b1", "updateFields": {}})
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_update_box(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "b1"})

        run_operation("box", "updateBox", {"boxKey": "b1", "updateFields": {"name": "Renamed"}})

        assert _call(mock_request)["json"] == {"name": "Renamed"}

    @patch('requests.request')
    def test_get_timeline_with_limit(self, mock_request, run_operation):
        mock_request.return_value = make_response([])

        run_operation("box", "getTimeline", {"boxKey": "b1", "limit": 5})

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v1/boxes/b1/timeline"
        assert kwargs["params"] == {"limit": 5}

    @patch('requests.request')
    def test_get_timeline_return_all_pages_by_limit(self, mock_request, run_operation):
        mock_request.side_effect = [
            make_response([{"key": "e1"}, {"key": "e2"}]),
            make_response([{"key": "e3"}]),
        ]

        result = run_operation("box", "getTimeline", {"boxKey": "b1", "returnAll": True, "limit": 2})

        assert [e["key"] for e in result] == ["e1", "e2", "e3"]
        assert _call(mock_request, 0)["params"] == {"page": 0, "limit": 2}
        assert _call(mock_request, 1)["params"] == {"page": 1, "limit": 2}

    @patch('requests.request')
    def test_search_boxes_returns_boxes(self, mock_request, run_operation):
        mock_request.return_value = make_response({"results": {"boxes": [{"key": "b9"}]}})

        result = run_operation("box", "searchBoxes", {"searchQuery": "acme", "pipelineKey": "p1"})

        kwargs = _call(mock_request)
        assert result == [{"key": "b9"}]
        assert kwargs["url"] == f"{BASE}/v1/search"
        assert kwargs["params"] == {"query": "acme", "pipelineKey": "p1"}

    @patch('requests.request')
    def test_search_boxes_without_matches(self, mock_request, run_operation):
        mock_request.return_value = make_response({"results": {}})

        assert run_operation("box", "searchBoxes", {"searchQuery": "none"}) == []

    def test_unsupported_operation(self, run_operation):
        with pytest.raises(UnsupportedOperationError, match='The box operation "explode" is not supported!'):
            run_operation("box", "explode", {})


class TestStage:

    @patch('requests.request')
    def test_list_stages_decodes_keyed_map(self, mock_request, run_operation):
        mock_request.return_value = make_response(
            {"5001": {"key": "5001", "name": "Lead"}, "5002": {"key": "5002", "name": "Won"}}
        )

        result = run_operation("stage", "listStages", {"pipelineKey": "p1"})

        assert [s["key"] for s in result] == ["5001", "5002"]

    @patch('requests.request')
    def test_create_stage_is_form_encoded(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "5003"})

        run_operation(
            "stage",
            "createStage",
            {"pipelineKey": "p1", "stageName": "Closed", "additionalFields": {"color": "#ff0000"}},
        )

        kwargs = _call(mock_request)
        assert kwargs["method"] == "PUT"
        assert kwargs["data"] == {"name": "Closed", "color": "#ff0000"}

    @patch('requests.request')
    def test_get_stage_requires_both_keys(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="stageKey"):
            run_operation("stage", "getStage", {"pipelineKey": "p1", "stageKey": {"mode": "list", "value": ""}})
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_update_stage(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "5001"})

        run_operation(
            "stage",
            "updateStage",
            {"pipelineKey": "p1", "stageKey": "5001", "updateFields": {"name": "Qualified"}},
        )

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v1/pipelines/p1/stages/5001"
        assert kwargs["json"] == {"name": "Qualified"}


class TestField:

    @patch('requests.request')
    def test_create_dropdown_requires_values(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="Dropdown Values are required"):
            run_operation(
                "field",
                "createField",
                {"pipelineKey": "p1", "fieldName": "Tier", "fieldType": "DROPDOWN"},
            )
        assert mock_request.call_count == 0

    @patch('requests.request')
    def test_create_field_is_form_encoded(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "1001"})

        run_operation(
            "field",
            "createField",
            {
                "pipelineKey": "p1",
                "fieldName": "Tier",
                "fieldType": "DROPDOWN",
                "additionalFields": {"enumValues": "Gold, Silver"},
            },
        )

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v1/pipelines/p1/fields"
        assert kwargs["data"] == {"name": "Tier", "type": "DROPDOWN", "enumValues": "Gold,Silver"}

    @patch('requests.request')
    def test_delete_field_reports_success(self, mock_request, run_operation):
        mock_request.return_value = make_response(None, status_code=200)

        result = run_operation("field", "deleteField", {"pipelineKey": "p1", "fieldKey": "1001"})

        assert result == {"success": True}
        assert _call(mock_request)["method"] == "DELETE"

    @patch('requests.request')
    def test_update_field_value(self, mock_request, run_operation):
        mock_request.return_value = make_response({"key": "1001", "value": "Gold"})

        run_operation(
            "field",
            "updateFieldValue",
            {"boxKey": "b1", "fieldKey": "1001", "fieldValue": "Gold"},
        )

        kwargs = _call(mock_request)
        assert kwargs["url"] == f"{BASE}/v1/boxes/b1/fields/1001"
        assert kwargs["json"] == {"value": "Gold"}

    @patch('requests.request')
    def test_update_field_requires_fields(self, mock_request, run_operation):
        with pytest.raises(NodeValidationError, match="At least one field"):
            run_operation("field", "updateField", {"pipelineKey": "p1", "fieldKey": "1001"})
        assert mock_request.call_count == 0
