"""Observability package."""
from node_sdk.observability.logging import (
    setup_logging,
    with_node_context,
)

__all__ = ["setup_logging", "with_node_context"]
