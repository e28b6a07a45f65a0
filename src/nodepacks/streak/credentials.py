"""
Streak API credential.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from node_sdk.basenode import NodeApiError
from node_sdk.credentials import BaseCredential

from .client import StreakClient


logger = logging.getLogger(__name__)


class StreakApiCredential(BaseCredential):
    """Streak API key, used as the Basic auth username with an empty password."""

    name = "streakApi"
    display_name = "Streak API"
    properties = [
        {
            "name": "apiKey",
            "displayName": "API Key",
            "type": "password",
            "required": True,
            "description": "Your Streak API key (Streak > Integrations > Streak API)",
        }
    ]

    def test(self) -> Dict[str, Any]:
        """
        Test the Streak credential by fetching the current user

        Returns:
            Dictionary with test results
        """
        validation = self.validate()
        if not validation["valid"]:
            return {"success": False, "message": validation["message"]}

        try:
            client = StreakClient(self.data["apiKey"])
            user = client.send("GET", "/users/me", version="v1")
        except NodeApiError as e:
            if e.status_code in (401, 403):
                return {"success": False, "message": "Invalid API key - authentication failed"}
            return {"success": False, "message": str(e)}
        except Exception as e:
            logger.error(f"Error testing Streak API credential: {str(e)}", exc_info=True)
            return {
                "success": False,
                "message": f"Error testing Streak API credential: {str(e)}",
            }

        email = user.get("email") if isinstance(user, dict) else None
        message = "Successfully connected to Streak API"
        if email:
            message += f" as {email}"
        return {"success": True, "message": message}
