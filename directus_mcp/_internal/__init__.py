"""Internal modules for the Directus MCP server.

WARNING: This package contains system-level modules used by the server.
These are not intended for direct use in application code.

Modules:
    http - Shared HTTP client configuration
    auth - Credential exchange
    operations - Static operation catalog
    dispatch - Per-call dispatcher
"""
