"""
Streak Node Pack Manifest - Registration function for entry-points.
"""

from node_registry.models import NodePackManifest

from .credentials import StreakApiCredential
from .node import StreakNode


MANIFEST = NodePackManifest(
    name="streak",
    version="1.0.0",
    description="Streak CRM pipelines, boxes, stages, fields, contacts, organizations, tasks and teams",
    author="agent-skills",
    license="MIT",
    nodes=["streak"],
    credentials=["streakApi"],
    entry_point="nodepacks.streak",
)


# Node classes by type
NODE_CLASSES = {
    "streak": StreakNode,
}

# Credential classes by name
CREDENTIAL_CLASSES = {
    "streakApi": StreakApiCredential,
}


def register_nodes():
    """
    Entry point function for node pack discovery.

    Returns tuple of (manifest, node_classes, credential_classes).
    """
    return MANIFEST, NODE_CLASSES, CREDENTIAL_CLASSES


__all__ = [
    "MANIFEST",
    "NODE_CLASSES",
    "CREDENTIAL_CLASSES",
    "register_nodes",
]
