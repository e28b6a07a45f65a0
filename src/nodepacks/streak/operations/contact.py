"""Contact operations. Contacts belong to a team and live on the v2 API."""

from __future__ import annotations

from typing import Any, Dict

from .common import (
    Handler,
    OperationContext,
    dispatch,
    pick,
    require,
    require_update_fields,
    split_list,
)


CONTACT_FIELDS = ("email", "firstName", "lastName", "fullName", "organization", "title")


def _contact_body(fields: Dict[str, Any]) -> Dict[str, Any]:
    body = pick(fields, CONTACT_FIELDS)
    phones = split_list(fields.get("phones"))
    if phones:
        body["phones"] = phones
    return body


def get_contact(ctx: OperationContext) -> Any:
    contact_key = ctx.key("contactKey")
    require(ctx, contactKey=contact_key)
    return ctx.client.send("GET", f"/contacts/{contact_key}")


def create_contact(ctx: OperationContext) -> Any:
    team_key = ctx.key("teamKey")
    email = ctx.param("email", "")
    require(ctx, teamKey=team_key, email=email)

    body = {"email": email}
    body.update(_contact_body(ctx.collection("additionalFields")))
    body["email"] = email
    return ctx.client.send("POST", f"/teams/{team_key}/contacts", body=body)


def update_contact(ctx: OperationContext) -> Any:
    contact_key = ctx.key("contactKey")
    require(ctx, contactKey=contact_key)
    update_fields = ctx.collection("updateFields")
    require_update_fields(ctx, update_fields)

    return ctx.client.send("POST", f"/contacts/{contact_key}", body=_contact_body(update_fields))


def delete_contact(ctx: OperationContext) -> Any:
    contact_key = ctx.key("contactKey")
    require(ctx, contactKey=contact_key)
    return ctx.client.send("DELETE", f"/contacts/{contact_key}")


OPERATIONS: Dict[str, Handler] = {
    "getContact": get_contact,
    "createContact": create_contact,
    "updateContact": update_contact,
    "deleteContact": delete_contact,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("contact", OPERATIONS, ctx, operation)
