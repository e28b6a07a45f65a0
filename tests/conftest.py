"""Pytest configuration and fixtures."""
import json
import os
from unittest.mock import Mock

import pytest

# Set test environment variables
os.environ["NODE_SDK_ENV"] = "test"
os.environ["NODE_SDK_LOG_JSON"] = "false"
os.environ.pop("STREAK_BASE_URL", None)

from node_sdk.config import reset_settings
from nodepacks.streak.config import reset_streak_settings


API_KEY = "test-streak-key"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so monkeypatched env vars take effect."""
    reset_settings()
    reset_streak_settings()
    yield
    reset_settings()
    reset_streak_settings()


def make_response(payload=None, status_code=200, text=None):
    """Build a mock requests.Response carrying a JSON payload."""
    response = Mock()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    if text is None:
        text = "" if payload is None else json.dumps(payload)
    response.text = text
    response.content = text.encode()
    response.json.return_value = payload
    if payload is None and text:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    return response


@pytest.fixture
def json_response():
    """Factory fixture: json_response(payload, status_code=200)."""
    return make_response


@pytest.fixture
def streak_client():
    from nodepacks.streak.client import StreakClient

    return StreakClient(API_KEY)


@pytest.fixture
def run_operation(streak_client):
    """
    Run a resource handler against plain parameters.

    Usage:
        result = run_operation("box", "getBox", {"boxKey": "b1"})
    """
    from node_sdk.basenode import NodeExecutionContext
    from nodepacks.streak.operations import RESOURCE_HANDLERS, OperationContext

    def run(resource, operation, parameters, item_index=0):
        context = NodeExecutionContext(
            parameters=parameters,
            credentials={},
            input_data=[{"json": {}}],
        )
        ctx = OperationContext(
            client=streak_client,
            get_parameter=context.get_node_parameter,
            item_index=item_index,
        )
        return RESOURCE_HANDLERS[resource](ctx, operation)

    return run
