"""Dispatch system for the Directus MCP server.

WARNING: This is a system-level module used by the server.
Do not call directly from user code.
"""

from directus_mcp._internal.dispatch.dispatcher import Dispatcher
from directus_mcp._internal.dispatch.models import (
    ERROR_PREFIX,
    CallContext,
    ResponseEnvelope,
    TextBlock,
)

__all__ = [
    "Dispatcher",
    "CallContext",
    "ResponseEnvelope",
    "TextBlock",
    "ERROR_PREFIX",
]
