"""
Response-shape decoding for Streak list endpoints.

The Streak API wraps collections differently depending on the endpoint
and the API version. Every list-returning handler goes through decode(),
which tries the known shapes in one fixed priority order:

1. EMPTY           None, "", [] or {}
2. NESTED_RESULTS  a list of {"results": [...]} pages (v2 teams), flattened
3. KEYED_MAP       a one-element list holding {"<key>": {"key": ...}, ...}
4. ARRAY           any other list, taken as-is
5. ENVELOPE        a dict carrying a list under the first present key of
                   results, data, stages, tasks, items, boxes
6. KEYED_MAP       a dict whose values are all objects with a "key"
7. SINGLE          anything else, wrapped as a one-element list
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, NamedTuple, Sequence


DEFAULT_ENVELOPE_KEYS: Sequence[str] = ("results", "data", "stages", "tasks", "items", "boxes")


class Shape(str, Enum):
    EMPTY = "empty"
    NESTED_RESULTS = "nested_results"
    KEYED_MAP = "keyed_map"
    ARRAY = "array"
    ENVELOPE = "envelope"
    SINGLE = "single"


class Decoded(NamedTuple):
    shape: Shape
    items: List[Any]


def _is_keyed_map(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and bool(value)
        and all(isinstance(v, dict) and v.get("key") for v in value.values())
    )


def _is_results_page(value: Any) -> bool:
    return isinstance(value, dict) and "key" not in value and isinstance(value.get("results"), list)


def decode(raw: Any, envelope_keys: Sequence[str] = DEFAULT_ENVELOPE_KEYS) -> Decoded:
    """Classify a raw response body and return its items as a flat list."""
    if raw is None or raw == "" or raw == [] or raw == {}:
        return Decoded(Shape.EMPTY, [])

    if isinstance(raw, list):
        if all(_is_results_page(entry) for entry in raw):
            items: List[Any] = []
            for entry in raw:
                items.extend(entry["results"])
            return Decoded(Shape.NESTED_RESULTS, items)
        if len(raw) == 1 and _is_keyed_map(raw[0]):
            return Decoded(Shape.KEYED_MAP, list(raw[0].values()))
        return Decoded(Shape.ARRAY, list(raw))

    if isinstance(raw, dict):
        for key in envelope_keys:
            if isinstance(raw.get(key), list):
                return Decoded(Shape.ENVELOPE, list(raw[key]))
        if _is_keyed_map(raw):
            return Decoded(Shape.KEYED_MAP, list(raw.values()))

    return Decoded(Shape.SINGLE, [raw])


def as_list(raw: Any, envelope_keys: Sequence[str] = DEFAULT_ENVELOPE_KEYS) -> List[Any]:
    """Shorthand for decode(raw).items."""
    return decode(raw, envelope_keys).items
