"""Public exceptions for the Directus MCP server."""

from typing import Any


class DirectusError(Exception):
    """Base exception for all Directus MCP errors."""


class ConfigLoadError(DirectusError):
    """Configuration file missing or unparseable."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class UnknownOperationError(DirectusError):
    """No operation is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Tool "{name}" not found')
        self.name = name


class InvalidArgumentError(DirectusError):
    """Operation arguments are missing or malformed."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class MissingPayloadError(InvalidArgumentError):
    """Neither fileUrl nor fileData was supplied for an upload."""

    def __init__(self) -> None:
        super().__init__("Either fileUrl or fileData must be provided")


class DirectusAPIError(DirectusError):
    """Error from the Directus API or the transport underneath it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors


class AuthenticationError(DirectusAPIError):
    """Credential exchange was rejected or could not complete."""


class RemoteCallError(DirectusAPIError):
    """Non-2xx response or transport failure on a regular operation."""
