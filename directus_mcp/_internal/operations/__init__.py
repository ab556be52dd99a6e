"""Operation catalog for the Directus MCP server.

WARNING: This is a system-level module used by the dispatcher.
The catalog is read-only at runtime.
"""

from directus_mcp._internal.operations.models import (
    ArgumentSpec,
    OperationSpec,
    OutboundRequest,
)
from directus_mcp._internal.operations.registry import OPERATIONS, list_operations, lookup

__all__ = [
    "ArgumentSpec",
    "OperationSpec",
    "OutboundRequest",
    "OPERATIONS",
    "list_operations",
    "lookup",
]
