"""MCP server exposing the CS-Cart tools over stdio or streamable HTTP.

This module wires the tool and resource registries into the MCP SDK's
low-level Server and runs it on the configured transport.

Architecture:
    - Protocol: mcp.server.lowlevel.Server (tools/list, tools/call,
      resources/list, resources/read)
    - stdio transport: mcp.server.stdio (default, one client per process)
    - HTTP transport: StreamableHTTPSessionManager mounted in a Starlette
      app served by uvicorn
    - Upstream: one CSCartClient shared by all calls for the process lifetime

Error mapping:
    ToolNotFoundError -> JSON-RPC METHOD_NOT_FOUND
    ToolInternalError -> JSON-RPC INTERNAL_ERROR
    Unknown resource URI -> JSON-RPC INVALID_PARAMS
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from typing import Any, Iterable

import uvicorn
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Mount
from starlette.types import Receive, Scope, Send

from . import __version__
from .api_client import CSCartClient
from .config import Config
from .dispatcher import Dispatcher
from .handler_wrappers import HandlerError, ProtocolError
from .resource_decorator import list_resources, read_resource

logger = logging.getLogger(__name__)

SERVER_NAME = "cscart-mcp-server"


def create_server(dispatcher: Dispatcher) -> Server:
    """Build the MCP protocol server around a dispatcher.

    tools/call is installed directly in the request handler table rather than
    through Server.call_tool(), so ProtocolError kinds reach the client as
    JSON-RPC errors instead of isError tool results.

    Args:
        dispatcher: Dispatcher bound to an upstream client

    Returns:
        Configured low-level MCP server (not yet running)
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [definition.to_mcp_tool() for definition in dispatcher.list_tools()]

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        try:
            result = await dispatcher.invoke(name, req.params.arguments)
        except ProtocolError as e:
            raise McpError(e.to_error_data()) from e
        return types.ServerResult(types.CallToolResult(content=result.content, isError=False))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=AnyUrl(meta.uri),
                name=meta.name,
                title=meta.title,
                description=meta.description,
                mimeType=meta.mime_type,
            )
            for meta in list_resources()
        ]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        try:
            text = read_resource(str(uri))
        except HandlerError as e:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=e.format())) from e
        return [ReadResourceContents(content=text, mime_type="application/json")]

    return server


class McpServer:
    """Runs the MCP server on the transport selected in Config.

    Usage:
        >>> McpServer(Config.from_env()).run()  # blocks until the transport closes

    Attributes:
        _config: Server configuration (upstream credentials, transport, HTTP host/port)
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    def run(self) -> None:
        """Blocking entry point: run until the client disconnects or the process is stopped."""
        asyncio.run(self._async_main())

    async def _async_main(self) -> None:
        async with CSCartClient(self._config) as client:
            server = create_server(Dispatcher(client))
            if self._config.mode == "http":
                await self._run_http_mode(server)
            else:
                await self._run_stdio_mode(server)

    async def _run_stdio_mode(self, server: Server) -> None:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("CS-Cart MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())

    def build_http_app(self, server: Server) -> Any:
        """Wrap the MCP server in a Starlette ASGI app for streamable HTTP.

        CORS middleware is added only when cors_origins is configured.
        """
        session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

        async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
            await session_manager.handle_request(scope, receive, send)

        @contextlib.asynccontextmanager
        async def lifespan(app: Starlette) -> AsyncIterator[None]:
            async with session_manager.run():
                yield

        app: Any = Starlette(
            routes=[Mount(self._config.http_path, app=handle_mcp)],
            lifespan=lifespan,
        )

        if self._config.cors_origins:
            app = CORSMiddleware(
                app,
                allow_origins=self._config.cors_origins,
                allow_methods=["GET", "POST", "DELETE"],
                allow_headers=["*"],
                expose_headers=self._config.cors_expose_headers,
            )
        return app

    async def _run_http_mode(self, server: Server) -> None:
        app = self.build_http_app(server)

        config = uvicorn.Config(
            app,
            host=self._config.http_host,
            port=self._config.http_port,
            log_level="warning",
        )
        logger.info(
            "CS-Cart MCP server listening on http://%s:%d%s",
            self._config.http_host,
            self._config.http_port,
            self._config.http_path,
        )
        await uvicorn.Server(config).serve()
