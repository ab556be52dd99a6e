"""Directus MCP server for Python.

Exposes a Directus instance as a set of MCP tools over stdio.

Public API:
    EffectiveConfig, load_config, resolve_config - Startup configuration
    main - Console entry point

Internal (system-level, not for direct use):
    _internal.operations - Static operation catalog
    _internal.dispatch - Per-call dispatcher
"""

from directus_mcp._version import __version__
from directus_mcp.config import EffectiveConfig, load_config, resolve_config

__all__ = ["__version__", "EffectiveConfig", "load_config", "resolve_config"]
