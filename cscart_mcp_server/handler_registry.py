"""Name -> handler lookup for tool calls.

@Tool fills this table at import time; Dispatcher.invoke() reads it. A
handler maps the call's argument dict to the UpstreamRequest to send.
"""
from typing import Any, Callable

from .api_client import UpstreamRequest
from .handler_wrappers import ToolNotFoundError

Handler = Callable[[dict[str, Any]], UpstreamRequest]

_handlers: dict[str, Handler] = {}


def register_handler(name: str, handler: Handler) -> None:
    if name in _handlers:
        raise ValueError(f"Handler already registered: {name}")
    _handlers[name] = handler


def get_handler(name: str) -> Handler:
    """Look up the handler for a tool name.

    Raises:
        ToolNotFoundError: If no tool is registered under the name
    """
    try:
        return _handlers[name]
    except KeyError:
        raise ToolNotFoundError(name) from None
