"""Tests for the MCP server wiring."""

import logging

import httpx
import mcp.types as types
import pytest
import respx
from mcp.server.lowlevel import Server

from directus_mcp._internal.dispatch import Dispatcher
from directus_mcp.config import EffectiveConfig
from directus_mcp.server import (
    SERVER_NAME,
    build_server,
    call_tool,
    configure_logging,
    tool_definitions,
)


def _dispatcher() -> Dispatcher:
    return Dispatcher(
        EffectiveConfig(
            base_url="https://cfg.example",
            access_token="cfg-token",
            email="cfg@example.com",
            password="cfg-pass",
        )
    )


class TestToolDefinitions:
    """Tests for tool_definitions()."""

    def test_lists_every_operation(self):
        """Should advertise all catalog operations as tools."""
        tools = tool_definitions()
        assert all(isinstance(tool, types.Tool) for tool in tools)
        names = [tool.name for tool in tools]
        assert names[0] == "getItems"
        assert "uploadFile" in names
        assert "getConfig" in names
        assert len(names) == 18

    def test_input_schema(self):
        """Tool schemas should come from the argument specs."""
        tool = next(t for t in tool_definitions() if t.name == "createItem")
        assert tool.description == "Create a new item in a collection"
        assert tool.inputSchema["required"] == ["collection", "data"]
        assert tool.inputSchema["properties"]["data"]["type"] == "object"


class TestCallTool:
    """Tests for call_tool()."""

    async def test_returns_text_content(self):
        """Should convert the envelope to MCP text content."""
        with respx.mock:
            respx.get("https://cfg.example/collections").mock(
                return_value=httpx.Response(200, json={"data": []})
            )
            content = await call_tool(_dispatcher(), "getCollections", {})

        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text == '{\n  "data": []\n}'

    async def test_errors_are_text(self):
        """Failures should be returned as text, not raised."""
        content = await call_tool(_dispatcher(), "nope", None)
        assert content[0].text == 'Error: Tool "nope" not found'


class TestBuildServer:
    """Tests for build_server()."""

    def test_registers_handlers(self):
        """Should register list_tools and call_tool handlers."""
        server = build_server(_dispatcher())
        assert isinstance(server, Server)
        assert server.name == SERVER_NAME
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    @pytest.mark.parametrize(
        "name,arguments,text",
        [
            ("nope", {}, 'Error: Tool "nope" not found'),
            ("createItem", {"collection": "c"}, "Error: Missing required argument: data"),
        ],
    )
    async def test_call_tool_request_reports_errors_as_text(self, name, arguments, text):
        """Failed calls should come back as ordinary text content."""
        server = build_server(_dispatcher())
        handler = server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name=name, arguments=arguments),
        )

        with respx.mock(assert_all_called=False) as respx_mock:
            route = respx_mock.route().mock(return_value=httpx.Response(200))
            result = await handler(request)

        assert result.root.isError is False
        assert len(result.root.content) == 1
        assert result.root.content[0].text == text
        assert not route.called


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def reset_package_logger(self):
        package_logger = logging.getLogger("directus_mcp")
        yield
        package_logger.handlers.clear()
        package_logger.setLevel(logging.NOTSET)

    def test_debug_level(self):
        """Debug flag should lower the package log level."""
        configure_logging(debug=True)
        package_logger = logging.getLogger("directus_mcp")
        assert package_logger.level == logging.DEBUG
        configure_logging(debug=False)
        assert package_logger.level == logging.INFO

    def test_no_duplicate_handlers(self):
        """Repeated configuration should not add handlers."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger("directus_mcp").handlers) == 1
