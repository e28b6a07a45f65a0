"""
Streak CRM node.

SYNC-WORKER SAFE: every request is a blocking, timeout-bounded call and
items are processed one after the other.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from node_sdk.basenode import (
    BaseNode,
    NodeExecutionData,
    NodeOperationError,
    NodeValidationError,
    UnsupportedOperationError,
)
from node_sdk.observability import with_node_context

from . import options
from .client import StreakClient
from .operations import RESOURCE_HANDLERS, OperationContext
from .properties import PARAMETERS


CREDENTIAL_NAME = "streakApi"


class StreakNode(BaseNode):
    """
    Streak - CRUD operations against the Streak CRM REST API.

    One input item produces one REST call; list operations fan out into
    one output item per entry, all paired with the source item.
    """

    type = "streak"
    version = 1

    description = {
        "displayName": "Streak",
        "name": "streak",
        "icon": "file:streak.svg",
        "group": ["transform"],
        "subtitle": '={{$parameter["operation"] + ": " + $parameter["resource"]}}',
        "description": "Consume the Streak CRM API",
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
        "documentationUrl": "https://streak.readme.io/reference",
    }

    properties = {
        "parameters": PARAMETERS,
        "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
    }

    def _client(self) -> StreakClient:
        credentials = self.get_credentials(CREDENTIAL_NAME)
        api_key = (credentials or {}).get("apiKey")
        if not api_key:
            raise NodeValidationError("No API key provided", parameter="apiKey")
        return StreakClient(api_key)

    def execute(self) -> List[List[NodeExecutionData]]:
        """Run the selected operation once per input item."""
        client = self._client()
        results: List[NodeExecutionData] = []

        for i, _item in enumerate(self.get_input_data()):
            resource = self.get_node_parameter("resource", i, "")
            operation = self.get_node_parameter("operation", i, "")
            extra = with_node_context(self.type, resource, operation, i)

            try:
                handler = RESOURCE_HANDLERS.get(resource)
                if handler is None:
                    raise UnsupportedOperationError(resource, item_index=i)

                self.logger.debug("Running Streak operation", extra=extra)
                ctx = OperationContext(client=client, get_parameter=self.get_node_parameter, item_index=i)
                data = handler(ctx, operation)
                results.extend(self.construct_execution_meta_data(data, i))

            except NodeOperationError as e:
                if not self.continue_on_fail:
                    raise
                self.logger.warning(f"Streak item {i} failed: {e.message}", extra=extra)
                results.append({"json": {"error": e.message}, "pairedItem": {"item": i}})

            except Exception as e:
                if not self.continue_on_fail:
                    raise NodeOperationError(str(e), node=self, item_index=i) from e
                self.logger.warning(f"Streak item {i} failed: {str(e)}", extra=extra)
                results.append({"json": {"error": str(e)}, "pairedItem": {"item": i}})

        return [results]

    def _current_pipeline_key(self) -> Optional[str]:
        value = self.get_node_parameter("pipelineKey", 0, "", extract_value=True)
        return str(value).strip() if value else None

    def get_load_options(self, method: str) -> List[Dict[str, Any]]:
        """Options for plain dropdowns (loadOptionsMethod)."""
        return options.load_options(method, self._client, self._current_pipeline_key())

    def list_search(self, method: str, filter: Optional[str] = None) -> Dict[str, Any]:
        """Results for resource-locator pickers (searchListMethod)."""
        return options.list_search(method, self._client, self._current_pipeline_key(), filter)
