"""
Operation handlers, one module per Streak resource.

RESOURCE_HANDLERS maps the node's `resource` parameter to the module's
handle(ctx, operation) function.
"""

from typing import Any, Callable, Dict

from . import box, contact, field, organization, pipeline, stage, task, team, user
from .common import OperationContext


RESOURCE_HANDLERS: Dict[str, Callable[[OperationContext, str], Any]] = {
    "user": user.handle,
    "team": team.handle,
    "pipeline": pipeline.handle,
    "box": box.handle,
    "stage": stage.handle,
    "field": field.handle,
    "contact": contact.handle,
    "organization": organization.handle,
    "task": task.handle,
}

__all__ = ["OperationContext", "RESOURCE_HANDLERS"]
