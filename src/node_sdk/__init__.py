"""
Node SDK - Minimal Python node execution semantics.

This package provides the runtime contract nodes are written against:
- NodeExecutionContext: Runtime context for a node (parameters, credentials, items)
- BaseNode: Abstract base class for node implementations
- HttpClient: Timeout-bounded HTTP helper with auth injection

All nodes execute synchronously.
"""

from .basenode import (
    BaseNode,
    NodeExecutionContext,
    NodeExecutionData,
    NodeParameter,
    NodeParameterType,
    NodeParameterTypeEnum,
    NodeOperationError,
    NodeValidationError,
    UnsupportedOperationError,
    NodeApiError,
    unwrap_resource_locator,
)
from .credentials import BaseCredential
from .http import HttpClient, HttpResponse, HttpApiError, NodeTimeoutError

__all__ = [
    "NodeExecutionData",
    # Context
    "NodeExecutionContext",
    "unwrap_resource_locator",
    # Base class
    "BaseNode",
    "NodeParameter",
    "NodeParameterType",
    "NodeParameterTypeEnum",
    # Errors
    "NodeOperationError",
    "NodeValidationError",
    "UnsupportedOperationError",
    "NodeApiError",
    # Credentials
    "BaseCredential",
    # HTTP
    "HttpClient",
    "HttpResponse",
    "HttpApiError",
    "NodeTimeoutError",
]
