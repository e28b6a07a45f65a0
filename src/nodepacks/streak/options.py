"""
Dropdown callbacks for the Streak node.

load_options() feeds plain option lists ([{name, value}]); list_search()
feeds resource-locator pickers ({"results": [{name, value, url}]}).
Neither ever raises: failures are logged and produce an empty result so
the editor keeps working without credentials or connectivity.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from .client import StreakClient
from .shapes import as_list


logger = logging.getLogger(__name__)

STREAK_WEB_URL = "https://www.streak.com"

ClientFactory = Callable[[], StreakClient]


def _pipelines(client: StreakClient, pipeline_key: Optional[str]) -> List[Any]:
    return as_list(client.send("GET", "/pipelines"))


def _teams(client: StreakClient, pipeline_key: Optional[str]) -> List[Any]:
    return as_list(client.send("GET", "/users/me/teams"))


def _stages(client: StreakClient, pipeline_key: Optional[str]) -> List[Any]:
    if not pipeline_key:
        return []
    return as_list(client.send("GET", f"/pipelines/{pipeline_key}/stages"))


def _boxes(client: StreakClient, pipeline_key: Optional[str]) -> List[Any]:
    if not pipeline_key:
        return []
    return as_list(client.send("GET", f"/pipelines/{pipeline_key}/boxes"))


# method name -> (fetcher, label for unnamed entries, url builder)
SOURCES: Dict[str, tuple] = {
    "getPipelineOptions": (
        _pipelines,
        "Pipeline",
        lambda entry, pk: f"{STREAK_WEB_URL}/pipeline/{entry['key']}",
    ),
    "getTeamOptions": (_teams, "Team", None),
    "getStageOptions": (
        _stages,
        "Stage",
        lambda entry, pk: f"{STREAK_WEB_URL}/pipeline/{pk}/stage/{entry['key']}",
    ),
    "getBoxOptions": (
        _boxes,
        "Box",
        lambda entry, pk: f"{STREAK_WEB_URL}/box/{entry['key']}",
    ),
}

SEARCHABLE = ("getPipelineOptions", "getStageOptions", "getBoxOptions")


def _keyed(entries: List[Any]) -> List[Dict[str, Any]]:
    return [e for e in entries if isinstance(e, dict) and e.get("key")]


def _label(entry: Dict[str, Any], noun: str) -> str:
    return f"{entry.get('name') or f'Unnamed {noun}'} ({entry['key']})"


def _matches(entry: Dict[str, Any], needle: str) -> bool:
    return needle in str(entry.get("name") or "").lower() or needle in str(entry["key"]).lower()


def load_options(
    method: str,
    client_factory: ClientFactory,
    pipeline_key: Optional[str] = None,
) -> List[Dict[str, Any]]:
    source = SOURCES.get(method)
    if source is None:
        logger.warning("Unknown load options method %s", method)
        return []
    fetch, noun, _ = source
    try:
        entries = _keyed(fetch(client_factory(), pipeline_key))
    except Exception as e:
        logger.error(f"Error loading {noun.lower()} options: {str(e)}", exc_info=True)
        return []
    return [{"name": _label(entry, noun), "value": entry["key"]} for entry in entries]


def list_search(
    method: str,
    client_factory: ClientFactory,
    pipeline_key: Optional[str] = None,
    filter: Optional[str] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    if method not in SEARCHABLE:
        logger.warning("Unknown list search method %s", method)
        return {"results": []}
    fetch, noun, url_for = SOURCES[method]
    try:
        entries = _keyed(fetch(client_factory(), pipeline_key))
    except Exception as e:
        logger.error(f"Error searching {noun.lower()} options: {str(e)}", exc_info=True)
        return {"results": []}

    if filter:
        needle = filter.lower()
        entries = [entry for entry in entries if _matches(entry, needle)]

    return {
        "results": [
            {
                "name": _label(entry, noun),
                "value": entry["key"],
                "url": url_for(entry, pipeline_key),
            }
            for entry in entries
        ]
    }
