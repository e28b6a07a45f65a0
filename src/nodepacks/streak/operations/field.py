"""
Field operations.

Field definitions are pipeline scoped (/pipelines/{key}/fields); field
values are box scoped (/boxes/{key}/fields).
"""

from __future__ import annotations

from typing import Any, Dict, List

from node_sdk.basenode import NodeValidationError

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


def _definition_keys(ctx: OperationContext):
    pipeline_key = ctx.key("pipelineKey")
    field_key = ctx.key("fieldKey")
    require(ctx, pipelineKey=pipeline_key, fieldKey=field_key)
    return pipeline_key, field_key


def _value_keys(ctx: OperationContext):
    box_key = ctx.key("boxKey")
    field_key = ctx.key("fieldKey")
    require(ctx, boxKey=box_key, fieldKey=field_key)
    return box_key, field_key


def list_fields(ctx: OperationContext) -> List[Any]:
    pipeline_key = ctx.key("pipelineKey")
    require(ctx, pipelineKey=pipeline_key)
    return as_list(ctx.client.send("GET", f"/pipelines/{pipeline_key}/fields"))


def get_field(ctx: OperationContext) -> Any:
    pipeline_key, field_key = _definition_keys(ctx)
    return ctx.client.send("GET", f"/pipelines/{pipeline_key}/fields/{field_key}")


def create_field(ctx: OperationContext) -> Any:
    pipeline_key = ctx.key("pipelineKey")
    name = ctx.param("fieldName", "")
    field_type = ctx.param("fieldType", "")
    require(ctx, pipelineKey=pipeline_key, fieldName=name, fieldType=field_type)

    additional = ctx.collection("additionalFields")
    body: Dict[str, Any] = {"name": name, "type": field_type}
    body.update(pick(additional, ("description", "keyName")))

    if field_type == "DROPDOWN":
        enum_values = split_list(additional.get("enumValues"))
        if not enum_values:
            raise NodeValidationError(
                "Dropdown Values are required for DROPDOWN field type",
                parameter="enumValues",
                item_index=ctx.item_index,
            )
        body["enumValues"] = enum_values

    return ctx.client.send("PUT", f"/pipelines/{pipeline_key}/fields", body=body)


def update_field(ctx: OperationContext) -> Any:
    pipeline_key, field_key = _definition_keys(ctx)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    return ctx.client.send(
        "POST", f"/pipelines/{pipeline_key}/fields/{field_key}", body=dict(update_fields)
    )


def delete_field(ctx: OperationContext) -> Dict[str, Any]:
    pipeline_key, field_key = _definition_keys(ctx)
    ctx.client.send("DELETE", f"/pipelines/{pipeline_key}/fields/{field_key}")
    return {"success": True}


def list_field_values(ctx: OperationContext) -> Any:
    box_key = ctx.key("boxKey")
    require(ctx, boxKey=box_key)
    return as_list(ctx.client.send("GET", f"/boxes/{box_key}/fields"))


def get_field_value(ctx: OperationContext) -> Any:
    box_key, field_key = _value_keys(ctx)
    return ctx.client.send("GET", f"/boxes/{box_key}/fields/{field_key}")


def update_field_value(ctx: OperationContext) -> Any:
    box_key, field_key = _value_keys(ctx)
    value = ctx.param("fieldValue", "")
    return ctx.client.send("POST", f"/boxes/{box_key}/fields/{field_key}", body={"value": value})


OPERATIONS: Dict[str, Handler] = {
    "listFields": list_fields,
    "getField": get_field,
    "createField": create_field,
    "updateField": update_field,
    "deleteField": delete_field,
    "listFieldValues": list_field_values,
    "getFieldValue": get_field_value,
    "updateFieldValue": update_field_value,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("field", OPERATIONS, ctx, operation)
