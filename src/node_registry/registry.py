"""
Node Registry - Central registry for node discovery and instantiation.

Supports two discovery methods:
1. Manual registration
2. Entry-points (for plugin node packs)
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Any, Dict, Iterator, List, Optional, Type, TYPE_CHECKING

from pydantic import ValidationError

from node_sdk.basenode import NodeParameter

from .models import NodeDefinition, NodePackManifest


if TYPE_CHECKING:
    from node_sdk.basenode import BaseNode


logger = logging.getLogger(__name__)

# Entry point group for node packs
NODE_PACK_ENTRY_POINT = "agent_skills.nodepacks"


class NodeRegistryError(Exception):
    """Raised when a node or pack cannot be registered."""


class NodeRegistry:
    """
    Central registry for discovering and instantiating nodes.

    Nodes can be registered via:
    - register_node(): Manual registration
    - discover_entry_points(): Automatic discovery via entry points
    - register_pack(): Register all nodes from a pack

    Usage:
        registry = NodeRegistry()
        registry.discover_entry_points()

        node = registry.create_node("streak")
    """

    def __init__(self):
        """Initialize empty registry."""
        self._nodes: Dict[str, NodeDefinition] = {}
        self._node_classes: Dict[str, Type["BaseNode"]] = {}
        self._credential_classes: Dict[str, Type[Any]] = {}
        self._packs: Dict[str, NodePackManifest] = {}
        self._discovered = False

    def register_node(
        self,
        node_class: Type["BaseNode"],
        node_type: Optional[str] = None,
    ) -> NodeDefinition:
        """
        Register a node class.

        Parameter declarations are validated against NodeParameter so a
        broken property schema fails at load time rather than in the editor.

        Args:
            node_class: BaseNode subclass
            node_type: Override node type (uses class.type if not provided)

        Returns:
            NodeDefinition for the registered node

        Raises:
            NodeRegistryError: If a parameter declaration is invalid
        """
        if node_type is None:
            node_type = getattr(node_class, "type", node_class.__name__.lower())

        definition = NodeDefinition.from_node_class(node_class)
        definition.node_type = node_type

        for parameter in definition.parameters:
            try:
                NodeParameter.model_validate(parameter)
            except ValidationError as e:
                raise NodeRegistryError(
                    f"Invalid parameter '{parameter.get('name')}' on node '{node_type}': {e}"
                ) from e

        self._nodes[node_type] = definition
        self._node_classes[node_type] = node_class

        logger.debug(f"Registered node: {node_type}")
        return definition

    def register_credential(self, credential_class: Type[Any]) -> None:
        """Register a credential type by its `name` attribute."""
        self._credential_classes[credential_class.name] = credential_class

    def register_pack(
        self,
        manifest: NodePackManifest,
        node_classes: Dict[str, Type["BaseNode"]],
        credential_classes: Optional[Dict[str, Type[Any]]] = None,
    ) -> None:
        """
        Register a node pack with its nodes.

        Args:
            manifest: Pack manifest
            node_classes: Map of node_type -> node class
            credential_classes: Map of credential name -> credential class
        """
        self._packs[manifest.name] = manifest

        for node_type, node_class in node_classes.items():
            definition = self.register_node(node_class, node_type)
            definition.node_pack = manifest.name

        for credential_class in (credential_classes or {}).values():
            self.register_credential(credential_class)

        logger.info(f"Registered pack '{manifest.name}' with {len(node_classes)} nodes")

    def discover_entry_points(self, force: bool = False) -> int:
        """
        Discover node packs via entry points.

        Entry points are defined in pyproject.toml:

            [project.entry-points."agent_skills.nodepacks"]
            mypack = "mypack:register_nodes"

        The entry point should be a function that returns:
        - (manifest, node_classes) or (manifest, node_classes, credential_classes)
        - Or just a node_classes dict

        Args:
            force: Re-discover even if already done

        Returns:
            Number of packs discovered
        """
        if self._discovered and not force:
            return len(self._packs)

        count = 0

        for ep in entry_points(group=NODE_PACK_ENTRY_POINT):
            try:
                register_func = ep.load()
                result = register_func()

                if isinstance(result, tuple):
                    self.register_pack(*result)
                elif isinstance(result, dict):
                    # Just node classes - create default manifest
                    manifest = NodePackManifest(
                        name=ep.name,
                        nodes=list(result.keys()),
                    )
                    self.register_pack(manifest, result)

                count += 1
                logger.info(f"Discovered node pack: {ep.name}")

            except Exception as e:
                logger.error(f"Failed to load node pack '{ep.name}': {e}")

        self._discovered = True
        return count

    def get_node(self, node_type: str) -> Optional[NodeDefinition]:
        """Get node definition by type."""
        return self._nodes.get(node_type)

    def get_node_class(self, node_type: str) -> Optional[Type["BaseNode"]]:
        """Get node class by type."""
        return self._node_classes.get(node_type)

    def get_credential_class(self, name: str) -> Optional[Type[Any]]:
        """Get credential class by credential type name."""
        return self._credential_classes.get(name)

    def create_node(self, node_type: str) -> Optional["BaseNode"]:
        """
        Create a node instance.

        Args:
            node_type: Node type identifier

        Returns:
            Node instance or None if not found
        """
        node_class = self.get_node_class(node_type)
        if node_class:
            return node_class()
        return None

    def list_packs(self) -> List[NodePackManifest]:
        """List all registered packs."""
        return list(self._packs.values())

    def list_node_types(self) -> List[str]:
        """List all registered node types."""
        return list(self._nodes.keys())

    def __len__(self) -> int:
        """Number of registered nodes."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeDefinition]:
        """Iterate over node definitions."""
        return iter(self._nodes.values())

    def __contains__(self, node_type: str) -> bool:
        """Check if node type is registered."""
        return node_type in self._nodes


__all__ = [
    "NodeRegistry",
    "NodeRegistryError",
    "NODE_PACK_ENTRY_POINT",
]
