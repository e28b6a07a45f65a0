"""
BaseCredential - shape and connection test for a credential type.

A credential class declares its name and fields; an instance wraps the
decrypted values the host resolved for one node run.
"""

from __future__ import annotations

from typing import Any, Dict, List


class BaseCredential:
    """Base class for credential types."""

    name: str = ""
    display_name: str = ""
    properties: List[Dict[str, Any]] = []

    def __init__(self, data: Dict[str, Any]) -> None:
        self.data = data or {}

    def validate(self) -> Dict[str, Any]:
        """Check that every required property carries a value."""
        missing = [
            prop["displayName"]
            for prop in self.properties
            if prop.get("required") and not self.data.get(prop["name"])
        ]
        if missing:
            return {"valid": False, "message": f"Missing required fields: {', '.join(missing)}"}
        return {"valid": True, "message": "Credential is valid"}

    def test(self) -> Dict[str, Any]:
        """Test the credential against the remote service."""
        validation = self.validate()
        return {"success": validation["valid"], "message": validation["message"]}

    @classmethod
    def get_definition(cls) -> Dict[str, Any]:
        return {
            "name": cls.name,
            "displayName": cls.display_name,
            "properties": cls.properties,
        }
