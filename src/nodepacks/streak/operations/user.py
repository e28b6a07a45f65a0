"""User operations."""

from __future__ import annotations

from typing import Any, Dict

from .common import Handler, OperationContext, dispatch, require


def get_current_user(ctx: OperationContext) -> Any:
    return ctx.client.send("GET", "/users/me")


def get_user(ctx: OperationContext) -> Any:
    user_key = ctx.key("userKey")
    require(ctx, userKey=user_key)
    return ctx.client.send("GET", f"/users/{user_key}")


OPERATIONS: Dict[str, Handler] = {
    "getCurrentUser": get_current_user,
    "getUser": get_user,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("user", OPERATIONS, ctx, operation)
