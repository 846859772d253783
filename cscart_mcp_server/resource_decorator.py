from dataclasses import dataclass
from typing import Any, Callable, Optional
import json
import logging

from .handler_wrappers import HandlerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition:
    uri: str
    name: str
    description: str
    title: Optional[str]
    mime_type: str
    handler: Callable[[], Any]


# Global registry storing all resources registered via @Resource decorator
# Key: uri, Value: ResourceDefinition
_registry: dict[str, ResourceDefinition] = {}


# ------------------------------------------------------------------------------
# Resource - Decorator class that registers functions as MCP resources
# ------------------------------------------------------------------------------
# Usage:
#   @Resource("cscart://status-codes", "Description for AI", name="status_codes")
#   def status_codes() -> dict[str, Any]:
#       ...
#
# Parameters:
#   - uri: Resource URI exposed to MCP clients
#   - description: Shown to AI to understand what the resource provides
#   - name: Unique resource identifier (required - explicit, not derived from URI)
#   - title: Optional human-readable display name
#
# Resources are static and read-only: the handler takes no arguments and its
# return value is served as JSON text.
# ------------------------------------------------------------------------------
class Resource:
    """Decorator for MCP resources.

    Args:
        uri: Resource URI exposed to MCP clients (e.g., "cscart://status-codes")
        description: Explanation of what the resource provides (shown to AI)
        name: Unique resource identifier (required)
        title: Optional human-readable display name (defaults to None)
    """

    def __init__(
        self,
        uri: str,
        description: str,
        name: str,
        *,
        title: Optional[str] = None,
    ):
        self.uri = uri
        self.description = description
        self.name = name
        self.title = title

    def __call__(self, func: Callable[[], Any]) -> Callable[[], Any]:
        """Register the decorated function as an MCP resource."""
        if self.uri in _registry:
            raise ValueError(f"Resource already registered: {self.uri}")

        if self.name in [meta.name for meta in _registry.values()]:
            raise ValueError(f"Resource name already registered: {self.name}")

        _registry[self.uri] = ResourceDefinition(
            uri=self.uri,
            name=self.name,
            description=self.description,
            title=self.title,
            mime_type="application/json",
            handler=func,
        )

        logger.debug("Registered resource: %s (name: %s)", self.uri, self.name)
        return func  # Return original so it can be called directly for testing


def list_resources() -> list[ResourceDefinition]:
    """Return every registered resource in registration order."""
    return list(_registry.values())


def read_resource(uri: str) -> str:
    """Run a resource handler and return its result as JSON text.

    Raises:
        HandlerError: If no resource is registered under the URI
    """
    meta = _registry.get(uri)
    if meta is None:
        raise HandlerError(
            f"Unknown resource: {uri}",
            hint="Use resources/list to see available resources",
        )
    return json.dumps(meta.handler(), indent=2, ensure_ascii=False)
