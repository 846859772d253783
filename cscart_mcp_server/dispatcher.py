"""Tool dispatch: name -> handler -> upstream request -> result envelope.

Every tool call goes through Dispatcher.invoke():
    1. Look up the handler (unknown name -> ToolNotFoundError, nothing runs)
    2. Handler maps the arguments to an UpstreamRequest
    3. CSCartClient sends it and returns the parsed JSON
    4. The JSON is pretty-printed into a single text content block

Any failure in steps 2-4 becomes one ToolInternalError naming the tool.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from mcp.types import TextContent

from . import primitives  # noqa: F401 - registers all tools and resources
from .api_client import CSCartClient
from .handler_registry import get_handler
from .handler_wrappers import internal_error
from .schema import ToolDefinition
from .tool_decorator import list_tools

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Envelope returned for every successful call: one text block of JSON."""

    content: list[TextContent]

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolResult":
        text = json.dumps(payload, indent=2, ensure_ascii=False)
        return cls(content=[TextContent(type="text", text=text)])

    @property
    def text(self) -> str:
        return self.content[0].text


class Dispatcher:
    """Routes tool calls to their handlers and the upstream API.

    Holds no per-call state, so concurrent invoke() calls are independent.

    Attributes:
        _client: Shared request executor for the upstream API
    """

    def __init__(self, client: CSCartClient) -> None:
        self._client = client

    def list_tools(self) -> list[ToolDefinition]:
        return list_tools()

    async def invoke(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResult:
        """Execute one tool call.

        Args:
            name: Registered tool name
            arguments: Tool arguments (None is treated as no arguments)

        Returns:
            ToolResult wrapping the upstream JSON response

        Raises:
            ToolNotFoundError: If name is not a registered tool
            ToolInternalError: For any failure while handling the call
        """
        handler = get_handler(name)
        arguments = dict(arguments or {})

        try:
            request = handler(arguments)
            logger.info("Tool %s -> %s %s", name, request.method, request.target)
            payload = await self._client.send(request)
        except Exception as e:
            raise internal_error(name, e) from e

        return ToolResult.from_payload(payload)
