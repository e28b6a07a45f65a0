"""
Streak Node Pack - Streak CRM integration.

Provides the `streak` node and the `streakApi` credential. Resources:
pipelines, boxes, stages, fields and field values, contacts,
organizations, tasks, teams and users.

SYNC-WORKER SAFE.
"""

from .credentials import StreakApiCredential
from .manifest import MANIFEST, register_nodes
from .node import StreakNode

__all__ = [
    "StreakNode",
    "StreakApiCredential",
    "MANIFEST",
    "register_nodes",
]
