"""
BaseNode - Abstract base class for Python node implementations.

All nodes inherit from BaseNode and implement the execute() method.
The host hands each node a NodeExecutionContext which carries the
resolved parameters, credentials and input items for one run.

SYNC-WORKER SAFE: execute() is synchronous.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


# ==============================================================================
# NodeParameterType
# ==============================================================================

NodeParameterType = Literal[
    "string", "number", "boolean", "options", "multiOptions",
    "color", "json", "collection", "dateTime", "node",
    "resourceLocator", "notice", "array", "code",
]


class NodeParameterTypeEnum(str, Enum):
    """Enum version for convenience."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OPTIONS = "options"
    MULTI_OPTIONS = "multiOptions"
    JSON = "json"
    COLLECTION = "collection"
    DATE_TIME = "dateTime"
    COLOR = "color"
    NODE = "node"
    RESOURCE_LOCATOR = "resourceLocator"
    NOTICE = "notice"
    ARRAY = "array"
    CODE = "code"


# ==============================================================================
# NodeParameter - Pydantic model for defining parameters
# ==============================================================================

class NodeParameter(BaseModel):
    """
    A single parameter in the node's properties.

    Nodes declare their properties as plain dicts; the registry validates
    them against this model when a node is registered.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Parameter key (internal name)")
    display_name: str = Field(..., alias="displayName", description="Human-readable label")
    type: NodeParameterType = Field(..., description="Parameter type")
    default: Any = Field(None, description="Default value")
    required: bool = Field(False, description="Is parameter required?")
    description: Optional[str] = Field(None, description="Help text")
    placeholder: Optional[str] = Field(None, description="Input placeholder")
    options: Optional[List[Dict[str, Any]]] = Field(
        None,
        description="Options for options/multiOptions/collection type"
    )
    display_options: Optional[Dict[str, Any]] = Field(
        None,
        alias="displayOptions",
        description="Conditional visibility"
    )


# ==============================================================================
# NodeExecutionData - Output data format
# ==============================================================================

class NodeExecutionData(TypedDict, total=False):
    """
    Single item of execution output data.

    Format: {"json": {...}, "pairedItem": {"item": 0}}
    """
    json: Dict[str, Any]
    pairedItem: Optional[Dict[str, int]]


# ==============================================================================
# Errors
# ==============================================================================

class NodeOperationError(Exception):
    """Error during node operation."""

    def __init__(
        self,
        message: str,
        node: Optional["BaseNode"] = None,
        item_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.node = node
        self.item_index = item_index
        super().__init__(message)


class NodeValidationError(NodeOperationError):
    """A required parameter is missing or empty. Raised before any network call."""

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        item_index: Optional[int] = None,
    ) -> None:
        super().__init__(message, item_index=item_index)
        self.parameter = parameter


class UnsupportedOperationError(NodeOperationError):
    """The resource or the operation value is not known to the node."""

    def __init__(
        self,
        resource: str,
        operation: Optional[str] = None,
        item_index: Optional[int] = None,
    ) -> None:
        if operation is None:
            message = f'The resource "{resource}" is not supported!'
        else:
            message = f'The {resource} operation "{operation}" is not supported!'
        super().__init__(message, item_index=item_index)
        self.resource = resource
        self.operation = operation


class NodeApiError(NodeOperationError):
    """Error from external API call."""

    def __init__(
        self,
        message: str,
        node: Optional["BaseNode"] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message, node)
        self.status_code = status_code
        self.response_body = response_body
        self.method = method
        self.path = path


# ==============================================================================
# BaseNode - Abstract base class
# ==============================================================================

class BaseNode(ABC):
    """
    Abstract base class for all Python node implementations.

    Nodes define:
    - type: Unique identifier (e.g., "streak")
    - version: Node version number
    - description: Node metadata dict
    - properties: Parameters and credentials

    And implement execute() which processes input items.

    Example:

        class EchoNode(BaseNode):
            type = "echo"
            version = 1

            def execute(self) -> List[List[NodeExecutionData]]:
                results = []
                for i, item in enumerate(self.get_input_data()):
                    data = {"echo": self.get_node_parameter("text", i, "")}
                    results.extend(self.construct_execution_meta_data(data, i))
                return [results]
    """

    type: str = "base"
    version: int = 1

    description: Dict[str, Any] = {
        "displayName": "Base Node",
        "name": "base",
        "description": "",
        "group": [],
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }

    properties: Dict[str, Any] = {
        "parameters": [],
        "credentials": [],
    }

    # Continue processing other items if one fails
    continue_on_fail: bool = False

    def __init__(self) -> None:
        """Initialize node instance."""
        self.logger = logging.getLogger(f"node.{self.type}")
        self._context: Optional[NodeExecutionContext] = None

    @abstractmethod
    def execute(self) -> List[List[NodeExecutionData]]:
        """
        Execute node operation.

        Returns:
            List[List[NodeExecutionData]]: Nested list of execution results.
            - Outer list represents output branches (usually 1)
            - Inner list represents items in that branch

        Raises:
            NodeOperationError: On operation failure
            NodeApiError: On API call failure
        """
        raise NotImplementedError

    # ==== Context Management ====

    def set_context(self, context: "NodeExecutionContext") -> None:
        """Set the execution context."""
        self._context = context
        if context.continue_on_fail is not None:
            self.continue_on_fail = context.continue_on_fail

    @property
    def context(self) -> "NodeExecutionContext":
        if self._context is None:
            raise NodeOperationError("No context set", node=self)
        return self._context

    # ==== Helper methods for subclasses ====

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = None,
        extract_value: bool = False,
    ) -> Any:
        """
        Get parameter value.

        Args:
            name: Parameter name (dot notation reaches into collections)
            item_index: Index of item the value is resolved for
            default: Default if not set
            extract_value: Unwrap resource-locator values to their plain key
        """
        if self._context is None:
            return default
        return self._context.get_node_parameter(
            name, item_index, default, extract_value=extract_value
        )

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """
        Get credentials by type name.

        Args:
            name: Credential type name (e.g., "streakApi")

        Returns:
            Credentials dict with decrypted values
        """
        return self.context.get_credentials(name)

    def get_input_data(self) -> List[Dict[str, Any]]:
        """
        Get input items from previous node.

        Returns:
            List of input items, each with 'json' key.
        """
        if self._context is None:
            return []
        return self._context.get_input_data()

    @staticmethod
    def return_json_array(data: Any) -> List[Dict[str, Any]]:
        """Normalize a handler result into a list of JSON objects."""
        if data is None:
            return []
        if not isinstance(data, list):
            data = [data]
        return [entry if isinstance(entry, dict) else {"value": entry} for entry in data]

    def construct_execution_meta_data(
        self,
        data: Any,
        item_index: int,
    ) -> List[NodeExecutionData]:
        """Wrap result JSON into output items paired with the source item."""
        return [
            {"json": entry, "pairedItem": {"item": item_index}}
            for entry in self.return_json_array(data)
        ]

    @classmethod
    def get_definition(cls) -> Dict[str, Any]:
        """Get full node definition for registration."""
        return {
            "type": cls.type,
            "version": cls.version,
            "description": cls.description,
            "properties": cls.properties,
        }


# ==============================================================================
# NodeExecutionContext - Runtime context for node execution
# ==============================================================================

def unwrap_resource_locator(value: Any) -> Any:
    """
    Reduce a resource-locator value to its plain key.

    Locators arrive as {"mode": "list"|"id", "value": "..."}; older
    workflows may store the key under "id" instead.
    """
    if isinstance(value, dict) and "mode" in value:
        inner = value.get("value")
        if inner in (None, ""):
            inner = value.get("id", inner)
        return inner
    return value


class NodeExecutionContext:
    """
    Runtime context provided to nodes during execution.

    Provides access to:
    - Parameters (node level, optionally overridden per item)
    - Credentials
    - Input data
    - The continue-on-fail flag of the node
    """

    def __init__(
        self,
        parameters: Dict[str, Any],
        credentials: Dict[str, Dict[str, Any]],
        input_data: List[Dict[str, Any]],
        workflow_id: Optional[str] = None,
        node_name: Optional[str] = None,
        item_parameters: Optional[List[Dict[str, Any]]] = None,
        continue_on_fail: Optional[bool] = None,
    ) -> None:
        self._parameters = parameters
        self._credentials = credentials
        self._input_data = input_data
        # Expression results already resolved by the host, one dict per item
        self._item_parameters = item_parameters or []
        self.workflow_id = workflow_id
        self.node_name = node_name
        self.continue_on_fail = continue_on_fail

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = None,
        extract_value: bool = False,
    ) -> Any:
        """Get parameter value."""
        value = _MISSING
        if 0 <= item_index < len(self._item_parameters):
            value = _get_nested(self._item_parameters[item_index], name)
        if value is _MISSING:
            value = _get_nested(self._parameters, name)
        if value is _MISSING:
            value = default
        if extract_value:
            value = unwrap_resource_locator(value)
        return value

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """Get credentials by type name."""
        if name not in self._credentials:
            raise NodeOperationError(f"Credentials '{name}' not found")
        return self._credentials[name]

    def get_input_data(self) -> List[Dict[str, Any]]:
        """Get input items."""
        return self._input_data


_MISSING = object()


def _get_nested(params: Dict[str, Any], name: str) -> Any:
    """Dot-notation lookup, e.g. 'updateFields.name' or 'values.0.key'."""
    current: Union[Dict[str, Any], List[Any], Any] = params
    for key in name.split("."):
        if isinstance(current, list) and key.isdigit():
            index = int(key)
            if index >= len(current):
                return _MISSING
            current = current[index]
        elif isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return _MISSING
    return current


__all__ = [
    "BaseNode",
    "NodeExecutionContext",
    "NodeExecutionData",
    "NodeParameter",
    "NodeParameterType",
    "NodeParameterTypeEnum",
    "NodeOperationError",
    "NodeValidationError",
    "UnsupportedOperationError",
    "NodeApiError",
    "unwrap_resource_locator",
]
