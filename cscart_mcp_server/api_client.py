"""HTTP client for the upstream CS-Cart REST API.

Handlers never talk to the network. They describe the call they want as an
UpstreamRequest; CSCartClient.send() is the single place that turns one into
an HTTP exchange.
"""

import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Optional
from urllib.parse import urlencode

import httpx

from .config import Config
from .handler_wrappers import HandlerError

logger = logging.getLogger(__name__)

# Cap on how much of an error response body is echoed back to the client
_ERROR_BODY_LIMIT = 500

Method = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class UpstreamRequest:
    """One call against the CS-Cart API.

    Attributes:
        method: HTTP method
        path: Path relative to the API base URL (e.g. "/products/42")
        query: Ordered query parameters, already rendered as strings
        body: JSON body, or None to send no body
    """

    method: Method
    path: str
    query: dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None

    @property
    def target(self) -> str:
        """Path plus query string; no "?" when there are no query parameters."""
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"


def format_value(value: Any) -> str:
    """Render an argument the way it appears in a URL.

    Examples:
        >>> format_value(42.0)
        '42'
        >>> format_value(True)
        'true'
        >>> format_value("A")
        'A'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def basic_auth_header(email: str, api_key: str) -> str:
    token = base64.b64encode(f"{email}:{api_key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class CSCartClient:
    """Shared request executor for all tools.

    Owns one httpx.AsyncClient for its lifetime unless one is passed in, in
    which case the caller is responsible for closing it.

    Usage:
        >>> async with CSCartClient(config) as client:
        ...     payload = await client.send(UpstreamRequest("GET", "/products/1"))
    """

    def __init__(self, config: Config, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._config = config
        self._http = http_client or httpx.AsyncClient()
        self._owns_http = http_client is None

    async def __aenter__(self) -> "CSCartClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(self._config.api_email, self._config.api_key),
        }

    def url_for(self, request: UpstreamRequest) -> str:
        return self._config.api_url.rstrip("/") + request.target

    async def send(self, request: UpstreamRequest) -> Any:
        """Send a request and return the parsed JSON body unmodified.

        Args:
            request: The call to perform

        Returns:
            Parsed JSON response, or None when the response body is empty

        Raises:
            ConfigurationError: If the API URL or credentials are not configured
            HandlerError: If the upstream answers with a non-2xx status
            httpx.HTTPError: On network failure
            ValueError: If the response body is not valid JSON
        """
        self._config.require_credentials()

        url = self.url_for(request)
        logger.debug("%s %s", request.method, url)

        response = await self._http.request(
            request.method,
            url,
            headers=self._headers(),
            json=request.body,
        )

        if not response.is_success:
            raise HandlerError(
                f"Request failed with status code {response.status_code}",
                hint="Check the IDs and field values against the CS-Cart API",
                response=response.text[:_ERROR_BODY_LIMIT],
            )

        if not response.content:
            return None
        return response.json()
