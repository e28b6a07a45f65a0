"""Team operations. Teams live on the v2 API."""

from __future__ import annotations

from typing import Any, Dict, List

from ..shapes import as_list
from .common import Handler, OperationContext, dispatch, require


def get_my_teams(ctx: OperationContext) -> List[Any]:
    """Teams embedded in the v2 user record, else the dedicated teams listing."""
    user = ctx.client.send("GET", "/users/me", version="v2")
    if isinstance(user, dict) and isinstance(user.get("teams"), list):
        return user["teams"]
    # v2 answers with [{"results": [...]}] pages
    return as_list(ctx.client.send("GET", "/users/me/teams"))


def get_team(ctx: OperationContext) -> Any:
    team_key = ctx.key("teamKey")
    require(ctx, teamKey=team_key)
    return ctx.client.send("GET", f"/teams/{team_key}")


OPERATIONS: Dict[str, Handler] = {
    "getMyTeams": get_my_teams,
    "getTeam": get_team,
}


def handle(ctx: OperationContext, operation: str) -> Any:
    return dispatch("team", OPERATIONS, ctx, operation)
