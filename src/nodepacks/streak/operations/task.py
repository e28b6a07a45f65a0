"""Task operations. Tasks hang off boxes and live on the v2 API."""

from __future__ import annotations

from typing import Any, Dict, List

from ..shapes import as_list
from .common import (
    Handler,
    OperationContext,
    dispatch,
    require,
    require_update_fields,
    split_list,
    to_epoch_ms,
)


EMPTY_TASK_LIST = {"tasks": [], "count": 0}


def _task_body(fields: Dict[str, Any], item_index: int) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if fields.get("text"):
        body["text"] = fields["text"]
    if fields.get("dueDate"):
        body["dueDate"] = to_epoch_ms(fields["dueDate"], item_index=item_index)
    assignees = split_list(fields.get("assignees"))
    if assignees:
        body["assignedToSharingEntries"] = [{"email": email} for email in assignees]
    return body


def get_task(ctx: OperationContext) -> Any:
    task_key = ctx.key("taskKey")
    require(ctx, taskKey=task_key)
    return ctx.client.send("GET", f"/tasks/{task_key}")


def get_tasks_in_box(ctx: OperationContext) -> List[Any]:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    path = f"/boxes/{box_key}/tasks"

    if ctx.return_all():
        tasks = ctx.client.fetch_all(path)
    else:
        tasks = as_list(ctx.client.send("GET", path, query={"limit": ctx.limit()}))
    return tasks or [dict(EMPTY_TASK_LIST)]


def create_task(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    text = ctx.param("text", "")
    require(ctx, boxKey=box_key, text=text)

    body: Dict[str, Any] = {"key": box_key, "text": text}
    extra = _task_body(ctx.collection("additionalFields"), ctx.item_index)
    extra.pop("text", None)
    body.update(extra)
    return ctx.client.send("POST", f"/boxes/{box_key}/tasks", body=body)


def update_task(ctx: OperationContext) -> Any:
    task_key = ctx.key("taskKey")
    require(ctx, taskKey=task_key)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    body = _task_body(update_fields, ctx.item_index)
    if "completed" in update_fields:
        body["status"] = "DONE" if update_fields["completed"] else "NOT_DONE"
    return ctx.client.send("POST", f"/tasks/{task_key}", body=body)


def delete_task(ctx: OperationContext) -> Any:
    task_key = ctx.key("taskKey")
    require(ctx, taskKey=task_key)
    response = ctx.client.send("DELETE", f"/tasks/{task_key}")
    if not response:
        return {"success": True, "message": "Task deleted successfully"}
    return response


OPERATIONS: Dict[str, Handler] = {
    "getTask": get_task,
    "getTasksInBox": get_tasks_in_box,
    "createTask": create_task,
    "updateTask": update_task,
    "deleteTask": delete_task,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("task", OPERATIONS, ctx, operation)
