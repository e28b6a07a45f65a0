"""Stage operations. Stages are always addressed through their pipeline."""

from __future__ import annotations

from typing import Any, Dict, List

from ..shapes import as_list
from .common import Handler, OperationContext, dispatch, pick, require, require_update_fields


def _stage_keys(ctx: OperationContext):
    pipeline_key = ctx.key("pipelineKey")
    stage_key = ctx.key("stageKey")
    require(ctx, pipelineKey=pipeline_key, stageKey=stage_key)
    return pipeline_key, stage_key


def list_stages(ctx: OperationContext) -> List[Any]:
    pipeline_key = ctx.key("pipelineKey")
    require(ctx, pipelineKey=pipeline_key)
    return as_list(ctx.client.send("GET", f"/pipelines/{pipeline_key}/stages"))


def get_stage(ctx: OperationContext) -> Any:
    pipeline_key, stage_key = _stage_keys(ctx)
    return ctx.client.send("GET", f"/pipelines/{pipeline_key}/stages/{stage_key}")


def create_stage(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    name = ctx.param("stageName", "")
    require(ctx, pipelineKey=pipeline_key, stageName=name)

    body: Dict[str, Any] = {"name": name}
    body.update(pick(ctx.collection("additionalFields"), ("color",)))
    return ctx.client.send("PUT", f"/pipelines/{pipeline_key}/stages", body=body)


def update_stage(ctx: OperationContext) -> Any:
    pipeline_key, stage_key = _stage_keys(ctx)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    return ctx.client.send(
        "POST",
        f"/pipelines/{pipeline_key}/stages/{stage_key}",
        body=pick(update_fields, ("name", "color")),
    )


def delete_stage(ctx: OperationContext) -> Any:
    pipeline_key, stage_key = _stage_keys(ctx)
    return ctx.client.send("DELETE", f"/pipelines/{pipeline_key}/stages/{stage_key}")


OPERATIONS: Dict[str, Handler] = {
    "listStages": list_stages,
    "getStage": get_stage,
    "createStage": create_stage,
    "updateStage": update_stage,
    "deleteStage": delete_stage,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("stage", OPERATIONS, ctx, operation)
