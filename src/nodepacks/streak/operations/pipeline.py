"""Pipeline operations."""

from __future__ import annotations

from typing import Any, Dict, List

from ..shapes import as_list
from .common import Handler, OperationContext, dispatch, limited, pick, require, split_list


def list_all_pipelines(ctx: OperationContext) -> List[Any]:
    return limited(as_list(ctx.client.send("GET", "/pipelines")), ctx)


def get_pipeline(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    require(ctx, pipelineKey=pipeline_key)
    return ctx.client.send("GET", f"/pipelines/{pipeline_key}")


def create_pipeline(ctx: OperationContext) -> Any:
    name = ctx.param("pipelineName", "")
    require(ctx, pipelineName=name)

    body: Dict[str, Any] = {"name": name}
    team_key = ctx.key("teamKey")
    if team_key:
        body["teamKey"] = team_key
    additional = ctx.collection("additionalFields")
    body.update(pick(additional, ("stageNames", "fieldNames", "fieldTypes")))
    if "teamWide" in additional:
        body["teamWide"] = bool(additional["teamWide"])

    return ctx.client.send("PUT", "/pipelines", body=body)


def update_pipeline(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    name = ctx.param("pipelineName", "")
    require(ctx, pipelineKey=pipeline_key, pipelineName=name)

    body: Dict[str, Any] = {"name": name}
    update_fields = ctx.collection("updateFields")
    body.update(pick(update_fields, ("description",)))
    if "orgWide" in update_fields:
        body["orgWide"] = bool(update_fields["orgWide"])

    return ctx.client.send("POST", f"/pipelines/{pipeline_key}", body=body)


def delete_pipeline(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    require(ctx, pipelineKey=pipeline_key)
    return ctx.client.send("DELETE", f"/pipelines/{pipeline_key}")


def move_boxes_batch(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    box_keys = split_list(ctx.param("boxKeys", []))
    target_key = ctx.key("targetPipelineKey")
    require(ctx, pipelineKey=pipeline_key, boxKeys=box_keys, targetPipelineKey=target_key)

    body = [{"key": key, "boxKey": key, "pipelineKey": target_key} for key in box_keys]
    return ctx.client.send("POST", f"/pipelines/{pipeline_key}/boxes/batch", body=body)


OPERATIONS: Dict[str, Handler] = {
    "listAllPipelines": list_all_pipelines,
    "getPipeline": get_pipeline,
    "createPipeline": create_pipeline,
    "updatePipeline": update_pipeline,
    "deletePipeline": delete_pipeline,
    "moveBoxesBatch": move_boxes_batch,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("pipeline", OPERATIONS, ctx, operation)
