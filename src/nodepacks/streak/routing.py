"""
Endpoint routing for the Streak API.

Streak serves some resources only from /api/v1 and others only from
/api/v2, and its create endpoints for pipelines, stages and fields only
accept form-encoded bodies. Both facts are captured here as ordered
pattern tables where `*` stands for exactly one path segment.
"""

from __future__ import annotations

from typing import Literal, Sequence, Tuple


ApiVersion = Literal["v1", "v2"]

DEFAULT_VERSION: ApiVersion = "v1"

DEFAULT_VERSION_ROUTES: Tuple[Tuple[str, ApiVersion], ...] = (
    ("/users/me/teams", "v2"),
    ("/search", "v1"),
    ("/teams/*", "v2"),
    ("/teams/*/contacts", "v2"),
    ("/teams/*/organizations", "v2"),
    ("/contacts/*", "v2"),
    ("/organizations/*", "v2"),
    ("/pipelines/*/boxes", "v2"),
    ("/pipelines/*/boxes/batch", "v2"),
    ("/boxes/*/tasks", "v2"),
    ("/tasks/*", "v2"),
)

FORM_ENCODED_ROUTES: Tuple[Tuple[str, str], ...] = (
    ("PUT", "/pipelines"),
    ("PUT", "/pipelines/*/stages"),
    ("PUT", "/pipelines/*/fields"),
)


def _segments(path: str) -> list:
    return path.split("?", 1)[0].strip("/").split("/")


def path_matches(pattern: str, path: str) -> bool:
    """Match a whole path against a pattern; `*` matches one non-empty segment."""
    pattern_parts = _segments(pattern)
    path_parts = _segments(path)
    if len(pattern_parts) != len(path_parts):
        return False
    return all(
        (expected == "*" and actual != "") or expected == actual
        for expected, actual in zip(pattern_parts, path_parts)
    )


class VersionResolver:
    """
    Decide which API version serves an endpoint path.

    Exact entries are checked before wildcard entries; within each group
    the first match in table order wins. Unknown paths go to v1.
    """

    def __init__(self, routes: Sequence[Tuple[str, ApiVersion]] = DEFAULT_VERSION_ROUTES):
        self.routes: Tuple[Tuple[str, ApiVersion], ...] = tuple(routes)
        self._exact = tuple((p, v) for p, v in self.routes if "*" not in p)
        self._wildcard = tuple((p, v) for p, v in self.routes if "*" in p)

    def resolve(self, path: str) -> ApiVersion:
        clean = path.split("?", 1)[0]
        for pattern, version in self._exact:
            if clean.rstrip("/") == pattern.rstrip("/"):
                return version
        for pattern, version in self._wildcard:
            if path_matches(pattern, clean):
                return version
        return DEFAULT_VERSION


def uses_form_encoding(
    method: str,
    path: str,
    routes: Sequence[Tuple[str, str]] = FORM_ENCODED_ROUTES,
) -> bool:
    """True when the endpoint only accepts application/x-www-form-urlencoded bodies."""
    method = method.upper()
    return any(m == method and path_matches(p, path) for m, p in routes)
