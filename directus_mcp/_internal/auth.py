"""Credential exchange against the Directus auth endpoint."""

import logging

import httpx

from directus_mcp._internal.http import create_http_client, extract_errors
from directus_mcp.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"


def _remote_message(errors: list | None, fallback: str) -> str:
    if errors and isinstance(errors[0], dict) and errors[0].get("message"):
        return str(errors[0]["message"])
    return fallback


async def login(base_url: str, email: str, password: str) -> str:
    """Exchange email and password for an access token.

    Tokens are neither cached nor refreshed: every call performs a new
    exchange and the caller decides where the token goes.

    Args:
        base_url: Directus API URL.
        email: User email.
        password: User password.

    Returns:
        The access token from `data.access_token`.

    Raises:
        AuthenticationError: The exchange was rejected (non-2xx), could not
            complete, or the response carried no token.
    """
    url = f"{base_url.rstrip('/')}{LOGIN_PATH}"
    logger.debug("Requesting access token for %s", email)

    try:
        async with create_http_client() as client:
            response = await client.post(url, json={"email": email, "password": password})
    except httpx.HTTPError as e:
        raise AuthenticationError(f"Authentication failed: {str(e) or type(e).__name__}") from e

    if not 200 <= response.status_code < 300:
        errors = extract_errors(response)
        message = _remote_message(
            errors, f"Request failed with status code {response.status_code}"
        )
        raise AuthenticationError(
            f"Authentication failed: {message}",
            status_code=response.status_code,
            errors=errors,
        )

    try:
        token = response.json()["data"]["access_token"]
    except (ValueError, KeyError, TypeError):
        token = None

    if not token:
        raise AuthenticationError(
            "Authentication failed: response did not contain an access token",
            status_code=response.status_code,
        )
    return str(token)
