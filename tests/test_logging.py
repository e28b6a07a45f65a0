"""Tests for node-context logging."""
import json
import logging

from node_sdk.observability import setup_logging, with_node_context
from node_sdk.observability.logging import CustomJsonFormatter, NodeContextFilter


def _record(**extra):
    record = logging.LogRecord("node.streak", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    NodeContextFilter().filter(record)
    return record


class TestNodeContextLogging:

    def test_with_node_context_drops_empty_fields(self):
        assert with_node_context("streak", "box", None, 0) == {
            "node_type": "streak",
            "resource": "box",
            "item_index": 0,
        }

    def test_json_formatter_includes_context(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

        line = json.loads(formatter.format(_record(**with_node_context("streak", "box", "getBox", 2))))

        assert line["message"] == "hello"
        assert line["level"] == "INFO"
        assert line["node_type"] == "streak"
        assert line["operation"] == "getBox"
        assert line["item_index"] == 2

    def test_json_formatter_omits_missing_context(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

        line = json.loads(formatter.format(_record()))

        assert "resource" not in line

    def test_setup_logging_uses_plain_text_when_configured(self, monkeypatch):
        monkeypatch.setenv("NODE_SDK_LOG_JSON", "false")

        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, CustomJsonFormatter)

    def test_setup_logging_uses_json_by_default(self, monkeypatch):
        monkeypatch.delenv("NODE_SDK_LOG_JSON", raising=False)

        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, CustomJsonFormatter)


class TestObservabilityExports:

    def test_public_surface(self):
        import node_sdk.observability as observability

        assert observability.__all__ == ["setup_logging", "with_node_context"]
        assert not hasattr(observability, "get_logger")
