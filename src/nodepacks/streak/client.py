"""
Streak API client: one authenticated request per call, plus a paginator.

Authentication is HTTP Basic with the API key as username and an empty
password. Every failure is wrapped once into NodeApiError carrying the
method, the path and whatever the server said; nothing is retried.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from node_sdk.basenode import NodeApiError, NodeValidationError
from node_sdk.http import HttpApiError, HttpClient, HttpResponse, NodeTimeoutError

from .config import get_streak_settings
from .routing import ApiVersion, VersionResolver, uses_form_encoding
from .shapes import as_list


logger = logging.getLogger(__name__)

JsonBody = Union[Dict[str, Any], List[Any]]


def encode_form(body: Dict[str, Any]) -> Dict[str, str]:
    """Flatten a body into form fields the way Streak's create endpoints expect."""
    form: Dict[str, str] = {}
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            form[key] = ",".join(str(v) for v in value)
        else:
            form[key] = str(value)
    return form


def extract_error_detail(text: Optional[str]) -> Optional[str]:
    """Best-effort readable message from an error response body."""
    text = text or ""
    try:
        payload = json.loads(text) if text else None
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        for key in ("error", "message", "errorMessage"):
            if payload.get(key):
                return str(payload[key])
    return text[:1000] or None


class StreakClient:
    """
    Thin Streak REST client.

    Usage:
        client = StreakClient(api_key)
        pipeline = client.send("GET", "/pipelines/abc")
        boxes = client.fetch_all("/pipelines/abc/boxes", page_size=100)
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        resolver: Optional[VersionResolver] = None,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise NodeValidationError("No API key provided", parameter="apiKey")
        settings = get_streak_settings()
        self.resolver = resolver or VersionResolver()
        self.http = HttpClient(
            base_url=base_url or settings.base_url,
            default_headers={"Accept": "application/json"},
            timeout=timeout,
            auth=(api_key, ""),
        )

    def send(
        self,
        method: str,
        path: str,
        body: Optional[JsonBody] = None,
        query: Optional[Dict[str, Any]] = None,
        version: Optional[ApiVersion] = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Raises:
            NodeApiError: On transport failure, timeout or non-2xx status
        """
        method = method.upper()
        version = version or self.resolver.resolve(path)
        endpoint = f"/{version}{path}"

        kwargs: Dict[str, Any] = {"params": query or None}
        if body is not None:
            if isinstance(body, dict) and uses_form_encoding(method, path):
                kwargs["data"] = encode_form(body)
                kwargs["headers"] = {"Content-Type": "application/x-www-form-urlencoded"}
            else:
                kwargs["json"] = body
                kwargs["headers"] = {"Content-Type": "application/json"}

        logger.debug("Streak request %s %s", method, endpoint)

        try:
            response = self.http.request(method, endpoint, **kwargs)
            response.raise_for_status()
        except HttpApiError as e:
            detail = extract_error_detail(e.response_body)
            message = f"Streak API error: {method} {path} failed: {detail or e}"
            logger.error(message)
            raise NodeApiError(
                message,
                status_code=e.status_code,
                response_body=e.response_body,
                method=method,
                path=path,
            ) from e
        except NodeTimeoutError as e:
            message = f"Streak API error: {method} {path} failed: {e}"
            logger.error(message)
            raise NodeApiError(message, method=method, path=path) from e

        return self._parse(response)

    @staticmethod
    def _parse(response: HttpResponse) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}

    def fetch_all(
        self,
        path: str,
        page_size: Optional[int] = None,
        extra_query: Optional[Dict[str, Any]] = None,
        max_pages: Optional[int] = None,
        version: Optional[ApiVersion] = None,
    ) -> List[Any]:
        """
        Fetch every page of a list endpoint.

        A page shorter than page_size is taken as the last one. When the
        final page is exactly page_size long, one more (empty) page is
        requested to confirm the end.
        """
        settings = get_streak_settings()
        page_size = page_size or settings.page_size
        max_pages = max_pages or settings.max_pages

        results: List[Any] = []
        for page in range(max_pages):
            query = {**(extra_query or {}), "page": page, "limit": page_size}
            batch = as_list(self.send("GET", path, query=query, version=version))
            results.extend(batch)
            if len(batch) < page_size:
                return results

        logger.warning(
            "Stopped paginating %s after %d pages (max_pages reached)", path, max_pages
        )
        return results
