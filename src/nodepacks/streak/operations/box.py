"""Box (deal) operations."""

from __future__ import annotations

from typing import Any, Dict, List

from ..shapes import as_list
from .common import (
    Handler,
    OperationContext,
    dispatch,
    pick,
    require,
    require_update_fields,
    split_list,
)


BOX_FIELDS = ("name", "notes", "stageKey", "assignedToTeamKeyOrUserKey")


def list_boxes(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    require(ctx, pipelineKey=pipeline_key)
    stage_key = ctx.key("stageKeyFilter")
    path = f"/pipelines/{pipeline_key}/boxes"

    if ctx.return_all():
        extra = {"stageKey": stage_key} if stage_key else None
        return ctx.client.fetch_all(path, page_size=ctx.limit() or None, extra_query=extra)

    query: Dict[str, Any] = {"limit": ctx.limit()}
    if stage_key:
        query["stageKey"] = stage_key
    return as_list(ctx.client.send("GET", path, query=query))


def get_box(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    return ctx.client.send("GET", f"/boxes/{box_key}")


def get_multiple_boxes(ctx: OperationContext) -> Any:
    box_keys = split_list(ctx.param("boxKeys", []))
    require(ctx, boxKeys=box_keys)
    return ctx.client.send("POST", "/boxes/batchGet", body={"boxKeys": box_keys})


def create_box(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    name = ctx.param("boxName", "")
    require(ctx, pipelineKey=pipeline_key, boxName=name)

    body: Dict[str, Any] = {"name": name}
    stage_key = ctx.key("stageKey")
    if stage_key:
        body["stageKey"] = stage_key
    body.update(pick(ctx.collection("additionalFields"), ("notes", "assignedToTeamKeyOrUserKey")))

    return ctx.client.send("POST", f"/pipelines/{pipeline_key}/boxes", body=body)


def update_box(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    return ctx.client.send("POST", f"/boxes/{box_key}", body=pick(update_fields, BOX_FIELDS))


def delete_box(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    return ctx.client.send("DELETE", f"/boxes/{box_key}")


def get_timeline(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    path = f"/boxes/{box_key}/timeline"

    if ctx.return_all():
        return ctx.client.fetch_all(path, page_size=ctx.limit() or None)
    return as_list(ctx.client.send("GET", path, query={"limit": ctx.limit()}))


def search_boxes(ctx: OperationContext) -> List[Any]:
    query = ctx.param("searchQuery", "")
    require(ctx, searchQuery=query)

    params: Dict[str, Any] = {"query": query}
    pipeline_key = ctx.key("pipelineKey")
    if pipeline_key:
        params["pipelineKey"] = pipeline_key
    stage_key = ctx.key("stageKeyFilter")
    if stage_key:
        params["stageKey"] = stage_key

    response = ctx.client.send("GET", "/search", query=params, version="v1")
    results = response.get("results") if isinstance(response, dict) else None
    if isinstance(results, dict) and isinstance(results.get("boxes"), list):
        return results["boxes"]
    return []


OPERATIONS: Dict[str, Handler] = {
    "listBoxes": list_boxes,
    "getBox": get_box,
    "getMultipleBoxes": get_multiple_boxes,
    "createBox": create_box,
    "updateBox": update_box,
    "deleteBox": delete_box,
    "getTimeline": get_timeline,
    "searchBoxes": search_boxes,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("box", OPERATIONS, ctx, operation)
