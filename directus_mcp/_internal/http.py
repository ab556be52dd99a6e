"""Shared HTTP client configuration."""

import json
from collections.abc import Mapping
from typing import Any

import httpx

from directus_mcp._version import __version__
from directus_mcp.exceptions import DirectusAPIError

# None disables httpx's default timeout: outbound calls are never cancelled.
DEFAULT_TIMEOUT: float | None = None


def create_http_client(
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds, or None for no timeout.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        follow_redirects=True,
        headers={"User-Agent": f"directus-mcp/{__version__}"},
    )


def build_headers(token: str, *, json_body: bool = True) -> dict[str, str]:
    """Build request headers with bearer authentication."""
    headers = {"Authorization": f"Bearer {token}"}
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


def encode_query(query: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a Directus query mapping into query-string parameters.

    Nested objects (filter, deep, aggregate) are sent as JSON text, lists of
    scalars (fields, sort) are comma-joined, booleans are lower-cased.
    None values are dropped.
    """
    if not query:
        return {}
    params: dict[str, str] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, dict):
            params[key] = json.dumps(value, separators=(",", ":"))
        elif isinstance(value, (list, tuple)):
            if all(not isinstance(item, (dict, list, tuple)) for item in value):
                params[key] = ",".join(str(item) for item in value)
            else:
                params[key] = json.dumps(value, separators=(",", ":"))
        else:
            params[key] = str(value)
    return params


def extract_errors(response: httpx.Response) -> list[Any] | None:
    """Return the `errors` list from a Directus error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("errors"):
        errors = body["errors"]
        return errors if isinstance(errors, list) else [errors]
    return None


def raise_for_status(
    response: httpx.Response,
    error_cls: type[DirectusAPIError] = DirectusAPIError,
) -> None:
    """Raise `error_cls` for any non-2xx response."""
    if 200 <= response.status_code < 300:
        return
    raise error_cls(
        f"Request failed with status code {response.status_code}",
        status_code=response.status_code,
        errors=extract_errors(response),
    )


def parse_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
