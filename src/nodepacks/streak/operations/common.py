"""
Shared plumbing for the Streak operation handlers.

Handlers are plain functions of an OperationContext: the client, a
parameter accessor bound to the running node, and the item index.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from node_sdk.basenode import NodeValidationError, UnsupportedOperationError

from ..client import StreakClient
from ..config import get_streak_settings


ParameterGetter = Callable[..., Any]
Handler = Callable[["OperationContext"], Any]


@dataclass
class OperationContext:
    client: StreakClient
    get_parameter: ParameterGetter
    item_index: int = 0

    def param(self, name: str, default: Any = None) -> Any:
        return self.get_parameter(name, self.item_index, default)

    def key(self, name: str) -> str:
        """Read a key parameter, unwrapping resource-locator values."""
        value = self.get_parameter(name, self.item_index, "", extract_value=True)
        if value is None:
            return ""
        return str(value).strip()

    def collection(self, name: str) -> Dict[str, Any]:
        return self.param(name, {}) or {}

    def return_all(self) -> bool:
        return bool(self.param("returnAll", False))

    def limit(self) -> int:
        return int(self.param("limit", get_streak_settings().default_limit) or 0)


def require(ctx: OperationContext, **values: Any) -> None:
    """Raise before any network call if a required value is missing or empty."""
    for name, value in values.items():
        if value is None or value == "" or value == [] or value == {}:
            raise NodeValidationError(
                f"Parameter {name} is required for this operation",
                parameter=name,
                item_index=ctx.item_index,
            )


def require_update_fields(ctx: OperationContext, update_fields: Mapping[str, Any]) -> None:
    if not update_fields:
        raise NodeValidationError(
            "At least one field to update must be specified",
            parameter="updateFields",
            item_index=ctx.item_index,
        )


def pick(source: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Copy the keys that carry a value; False and 0 count as values."""
    return {
        key: source[key]
        for key in keys
        if key in source and source[key] is not None and source[key] != "" and source[key] != []
    }


def split_list(value: Any) -> List[str]:
    """Accept a comma separated string or a list and return clean strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(part).strip() for part in value if str(part).strip()]
    return [str(value)]


def to_epoch_ms(value: Any, parameter: str = "dueDate", item_index: Optional[int] = None) -> int:
    """Convert an ISO date string, datetime or number into Unix milliseconds."""
    invalid = NodeValidationError(
        f"Invalid date value for {parameter}: {value!r}",
        parameter=parameter,
        item_index=item_index,
    )
    if isinstance(value, bool):
        raise invalid
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, datetime):
        moment = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError as e:
            raise invalid from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


def limited(items: List[Any], ctx: OperationContext) -> List[Any]:
    if ctx.return_all():
        return items
    limit = ctx.limit()
    return items[:limit] if limit else items


def dispatch(
    resource: str,
    operations: Mapping[str, Handler],
    ctx: OperationContext,
    operation: Optional[str],
) -> Any:
    handler = operations.get(operation or "")
    if handler is None:
        raise UnsupportedOperationError(resource, operation or "", item_index=ctx.item_index)
    return handler(ctx)
