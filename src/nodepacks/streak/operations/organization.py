"""Organization operations. Organizations belong to a team and live on the v2 API."""

from __future__ import annotations

from typing import Any, Dict

from node_sdk.basenode import NodeValidationError

from .common import (
    Handler,
    OperationContext,
    dispatch,
    pick,
    require,
    require_update_fields,
    split_list,
)


ORGANIZATION_FIELDS = (
    "name",
    "addresses",
    "employeeCount",
    "facebookHandle",
    "industry",
    "linkedInHandle",
    "logoUrl",
    "other",
    "relationships",
    "twitterHandle",
)
LIST_FIELDS = ("domains", "phoneNumbers")


def _organization_body(fields: Dict[str, Any]) -> Dict[str, Any]:
    body = pick(fields, ORGANIZATION_FIELDS)
    for name in LIST_FIELDS:
        values = split_list(fields.get(name))
        if values:
            body[name] = values
    return body


def get_organization(ctx: OperationContext) -> Any:
    organization_key = ctx.key("organizationKey")
    require(ctx, organizationKey=organization_key)
    return ctx.client.send("GET", f"/organizations/{organization_key}")


def create_organization(ctx: OperationContext) -> Any:
    team_key = ctx.key("teamKey")
    name = ctx.param("name", "")
    require(ctx, teamKey=team_key, name=name)

    body = _organization_body(ctx.collection("additionalFields"))
    body["name"] = name
    return ctx.client.send("POST", f"/teams/{team_key}/organizations", body=body)


def check_existing_organizations(ctx: OperationContext) -> Any:
    team_key = ctx.key("teamKey")
    require(ctx, teamKey=team_key)

    body = pick(ctx.collection("checkFields"), ("domain", "name"))
    if not body:
        raise NodeValidationError(
            "At least one of domain or name must be specified",
            parameter="checkFields",
            item_index=ctx.item_index,
        )
    return ctx.client.send(
        "POST",
        f"/teams/{team_key}/organizations",
        body=body,
        query={"getIfExisting": "true"},
    )


def update_organization(ctx: OperationContext) -> Any:
    organization_key = ctx.key("organizationKey")
    require(ctx, organizationKey=organization_key)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    return ctx.client.send(
        "POST", f"/organizations/{organization_key}", body=_organization_body(update_fields)
    )


def delete_organization(ctx: OperationContext) -> Any:
    organization_key = ctx.key("organizationKey")
    require(ctx, organizationKey=organization_key)
    return ctx.client.send("DELETE", f"/organizations/{organization_key}")


OPERATIONS: Dict[str, Handler] = {
    "getOrganization": get_organization,
    "createOrganization": create_organization,
    "checkExistingOrganizations": check_existing_organizations,
    "updateOrganization": update_organization,
    "deleteOrganization": delete_organization,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("organization", OPERATIONS, ctx, operation)
