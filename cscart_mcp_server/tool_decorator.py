from typing import Any, Callable, Sequence
import logging

from .handler_registry import register_handler
from .handler_wrappers import _require_args
from .schema import Param, ToolDefinition

logger = logging.getLogger(__name__)

# Global registry storing all tools registered via @Tool decorator, in
# registration order.
# Key: tool name, Value: ToolDefinition
_registry: dict[str, ToolDefinition] = {}


# ------------------------------------------------------------------------------
# Tool - Decorator class that registers functions as MCP tools
# ------------------------------------------------------------------------------
# Usage:
#   @Tool("get_order", "Description for AI", params=[
#       NumberParam(name="order_id", description="Order ID", required=True),
#   ])
#   def get_order(args: dict) -> UpstreamRequest:
#       ...
#
# Parameters:
#   - name: Unique tool identifier exposed to MCP clients
#   - description: Shown to AI to understand when/how to use the tool
#   - params: Input shape declarations, in the order they are advertised
#
# The decorated function is a pure mapping from the argument dict to an
# UpstreamRequest. It never performs I/O; the Dispatcher sends the request.
#
# What happens at import time:
#   1. Builds the ToolDefinition from name/description/params
#   2. Wraps with _require_args for every param marked required
#   3. Registers handler for dispatch
#   4. Stores the definition in _registry for tools/list
# ------------------------------------------------------------------------------
class Tool:
    def __init__(
        self,
        name: str,
        description: str,
        *,
        params: Sequence[Param] = (),
    ):
        self.definition = ToolDefinition(
            name=name,
            description=description,
            params=tuple(params),
        )

    @property
    def name(self) -> str:
        return self.definition.name

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self._register(func)
        return func

    def _register(self, func: Callable[..., Any]) -> None:
        if self.name in _registry:
            raise ValueError(f"Tool already registered: {self.name}")

        wrapped = _require_args(self.definition.required)(func)

        register_handler(self.name, wrapped)
        _registry[self.name] = self.definition

        logger.debug("Registered tool: %s (required: %s)", self.name, self.definition.required)


def list_tools() -> list[ToolDefinition]:
    """Return every registered tool definition in registration order."""
    return list(_registry.values())


def get_tool(name: str) -> ToolDefinition:
    """Return the definition for a tool name. Raises KeyError if not found."""
    return _registry[name]
