"""MCP stdio server exposing Directus operations as tools."""

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from directus_mcp._internal.dispatch import Dispatcher
from directus_mcp._internal.operations import list_operations
from directus_mcp._version import __version__
from directus_mcp.config import describe_config, load_config

logger = logging.getLogger(__name__)

SERVER_NAME = "directus-api-extended"
DEBUG_ENV = "DIRECTUS_MCP_DEBUG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Send package logs to stderr; stdout carries protocol frames."""
    package_logger = logging.getLogger("directus_mcp")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not package_logger.handlers:  # Prevent handler duplication
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)


def tool_definitions() -> list[types.Tool]:
    """Tool listing built from the operation catalog."""
    return [
        types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
        for spec in list_operations()
    ]


async def call_tool(
    dispatcher: Dispatcher, name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    envelope = await dispatcher.handle(name, arguments or {})
    return [types.TextContent(type="text", text=block.text) for block in envelope.content]


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server with list_tools and call_tool handlers."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return tool_definitions()

    # Argument validation happens in the dispatcher
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await call_tool(dispatcher, name, arguments)

    return server


async def serve(dispatcher: Dispatcher) -> None:
    """Run the server over stdin/stdout until the input stream closes."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main(argv: Sequence[str] | None = None) -> None:
    """Console entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging(debug=os.environ.get(DEBUG_ENV, "") == "1")

    config = load_config(os.environ, args)
    for line in describe_config(config):
        logger.info(line)

    logger.info("Starting %s %s on stdio", SERVER_NAME, __version__)
    anyio.run(serve, Dispatcher(config))


if __name__ == "__main__":
    main()
