"""Protocol tests: a real MCP client session talking to the server in memory."""
from __future__ import annotations

import json

import httpx
import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from pydantic import AnyUrl
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware

from cscart_mcp_server.api_client import CSCartClient
from cscart_mcp_server.dispatcher import Dispatcher
from cscart_mcp_server.mcp_server import SERVER_NAME, McpServer, create_server

from ..helpers import FakeUpstream, make_config


@pytest.fixture
def server(dispatcher):
    return create_server(dispatcher)


def server_for(upstream: FakeUpstream):
    client = CSCartClient(make_config(), upstream.http_client())
    return create_server(Dispatcher(client))


class TestTools:
    """tools/list and tools/call over an MCP session."""

    def test_server_name(self, server):
        assert server.name == SERVER_NAME

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_tools()
        names = [tool.name for tool in result.tools]
        assert len(names) == 12
        assert names[0] == "get_products"
        assert names[-1] == "get_sales_statistics"
        order = next(tool for tool in result.tools if tool.name == "get_order")
        assert order.inputSchema["required"] == ["order_id"]

    @pytest.mark.asyncio
    async def test_call_tool_returns_json_text(self, server, upstream):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("get_product", {"product_id": 42})
        assert not result.isError
        assert len(result.content) == 1
        block = result.content[0]
        assert block.type == "text"
        assert json.loads(block.text) == {"method": "GET", "target": "/products/42"}
        assert upstream.last.method == "GET"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_method_not_found(self, server, upstream):
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("drop_database", {})
        assert exc_info.value.error.code == types.METHOD_NOT_FOUND
        assert exc_info.value.error.message == "Unknown tool: drop_database"
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_upstream_failure_is_internal_error(self):
        upstream = FakeUpstream(lambda request: httpx.Response(500, text="boom"))
        async with create_connected_server_and_client_session(server_for(upstream)) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("get_orders", {})
        error = exc_info.value.error
        assert error.code == types.INTERNAL_ERROR
        assert error.message.startswith("Error executing get_orders: ")
        assert "Request failed with status code 500" in error.message

    @pytest.mark.asyncio
    async def test_missing_argument_is_internal_error(self, server, upstream):
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("get_order", {})
        assert exc_info.value.error.code == types.INTERNAL_ERROR
        assert "order_id" in exc_info.value.error.message
        assert upstream.requests == []


class TestResources:
    """resources/list and resources/read over an MCP session."""

    @pytest.mark.asyncio
    async def test_list_resources(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_resources()
        assert [str(r.uri) for r in result.resources] == ["cscart://status-codes"]
        assert result.resources[0].mimeType == "application/json"

    @pytest.mark.asyncio
    async def test_read_status_codes(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.read_resource(AnyUrl("cscart://status-codes"))
        data = json.loads(result.contents[0].text)
        assert data["order_status"]["C"] == "Complete"

    @pytest.mark.asyncio
    async def test_unknown_resource_is_invalid_params(self, server):
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.read_resource(AnyUrl("cscart://missing"))
        assert exc_info.value.error.code == types.INVALID_PARAMS


class TestHttpApp:
    """Shape of the streamable HTTP application."""

    def test_plain_app_without_cors(self, server):
        app = McpServer(make_config(mode="http")).build_http_app(server)
        assert isinstance(app, Starlette)
        assert app.routes[0].path == "/mcp"

    def test_cors_wraps_app(self, server):
        config = make_config(mode="http", cors_origins=["https://app.example"], http_path="/rpc")
        app = McpServer(config).build_http_app(server)
        assert isinstance(app, CORSMiddleware)
        assert app.allow_origins == ["https://app.example"]
