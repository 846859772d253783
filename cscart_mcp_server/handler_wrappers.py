# handler_wrappers.py
"""Shared errors and wrappers for tool and resource handlers.

Error Handling Strategy:
    Handler functions can raise HandlerError for structured errors with hints,
    or let any other exception escape for unexpected failures. The dispatcher
    turns both into a single ToolInternalError carrying the tool name. An
    unknown tool name is a ToolNotFoundError raised before any handler runs.
    The MCP adapter converts both ProtocolError kinds into JSON-RPC errors.
"""

from typing import Any, Callable, Iterable, Optional
from functools import wraps
import logging

from mcp.types import ErrorData, INTERNAL_ERROR, METHOD_NOT_FOUND

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# HandlerError - Custom exception for handler failures with structured error info
# ------------------------------------------------------------------------------
# Raise this in handlers or in the request executor to return a clean error
# to the AI client.
# - message: What went wrong
# - hint: Actionable suggestion for the AI (optional)
# - **data: Extra context like product_id, status code, etc. (optional)
#
# Example: raise HandlerError("Missing required argument(s): product_id", hint="...")
# ------------------------------------------------------------------------------
class HandlerError(Exception):
    """Structured error for tool and resource handlers.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the AI (optional)
        **data: Extra context (optional)
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data

    def format(self) -> str:
        """Flatten message, hint and context into one line for the AI client."""
        msg = self.message
        if self.hint:
            msg += f" (hint: {self.hint})"
        if self.data:
            msg += f" (context: {self.data})"
        return msg


# ------------------------------------------------------------------------------
# ProtocolError - Errors that surface to the MCP client as JSON-RPC errors
# ------------------------------------------------------------------------------
class ProtocolError(Exception):
    """Base class for errors with an MCP error code."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_error_data(self) -> ErrorData:
        return ErrorData(code=self.code, message=self.message)


class ToolNotFoundError(ProtocolError):
    """The requested tool name is not in the registry."""

    code = METHOD_NOT_FOUND

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolInternalError(ProtocolError):
    """Anything that went wrong while handling a known tool."""

    code = INTERNAL_ERROR

    def __init__(self, tool_name: str, detail: str):
        super().__init__(f"Error executing {tool_name}: {detail}")
        self.tool_name = tool_name
        self.detail = detail


# ------------------------------------------------------------------------------
# internal_error - Map any failure raised while handling a tool call
# ------------------------------------------------------------------------------
#   - HandlerError -> message with hint/context suffixes
#   - Other exceptions -> "TypeError: ..." with full traceback logged
# ------------------------------------------------------------------------------
def internal_error(tool_name: str, exc: BaseException) -> ToolInternalError:
    """Build the ToolInternalError for a failure inside a tool call."""
    if isinstance(exc, HandlerError):
        logger.warning("Tool %s failed: %s (hint: %s)", tool_name, exc.message, exc.hint)
        return ToolInternalError(tool_name, exc.format())

    logger.exception("Unexpected error in tool %s: %s", tool_name, exc)
    return ToolInternalError(tool_name, f"{type(exc).__name__}: {exc}")


# ------------------------------------------------------------------------------
# _require_args - Check that required arguments are present
# ------------------------------------------------------------------------------
# Raises HandlerError naming every required argument that is absent or null.
# Applied by @Tool to each handler using the names its input shape marks
# as required.
# ------------------------------------------------------------------------------
def _require_args(required: Iterable[str]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a handler to check its required arguments before it runs.

    Args:
        required: Argument names that must be present and not None

    Returns:
        Decorator producing a wrapped handler
    """
    required = tuple(required)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if not required:
            return func

        @wraps(func)
        def wrapper(arguments: dict[str, Any]) -> Any:
            missing = [name for name in required if arguments.get(name) is None]
            if missing:
                raise HandlerError(
                    f"Missing required argument(s): {', '.join(missing)}",
                    hint="Check the tool's input schema with tools/list",
                )
            return func(arguments)

        return wrapper

    return decorator
