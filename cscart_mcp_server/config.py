"""Configuration management for the CS-Cart MCP server.

This module provides the configuration dataclass. Settings come from the
process environment once at startup and are then passed explicitly to the
components that need them.
"""

import os
from dataclasses import dataclass, field
from typing import Literal, List, Mapping, Optional


# Environment variable names for each field
ENV_VARS: dict[str, str] = {
    "api_url": "CSCART_API_URL",
    "api_email": "CSCART_API_EMAIL",
    "api_key": "CSCART_API_KEY",
    "log_level": "LOG_LEVEL",
    "mode": "MCP_TRANSPORT",
    "http_host": "MCP_HTTP_HOST",
    "http_port": "MCP_HTTP_PORT",
    "http_path": "MCP_HTTP_PATH",
    "cors_origins": "MCP_CORS_ORIGINS",
}

REQUIRED_FIELDS = ("api_url", "api_email", "api_key")


class ConfigurationError(Exception):
    """Raised when a mandatory setting is missing or invalid."""


@dataclass
class Config:
    """
    Server configuration.

    The three upstream settings (URL, email, API key) have no usable default.
    Everything else has a sensible default so the server starts on stdio
    without further configuration.
    """

    # Upstream CS-Cart API
    api_url: str = ""
    api_email: str = ""
    api_key: str = ""

    # Logging
    log_level: str = "INFO"

    # Transport mode
    mode: Literal["stdio", "http"] = "stdio"

    # HTTP settings (only used when mode == "http")
    http_port: int = 3141
    http_host: str = "127.0.0.1"
    http_path: str = "/mcp"

    # CORS settings (list of allowed origins, empty = CORS disabled)
    # Use ["*"] to allow all origins (not recommended for production)
    cors_origins: List[str] = field(default_factory=list)

    # MCP protocol requires session ID header to be readable by browsers
    cors_expose_headers: List[str] = field(
        default_factory=lambda: ["mcp-session-id", "mcp-protocol-version"]
    )

    def missing_settings(self) -> list[str]:
        """
        Return the environment variable names of required settings that are empty.

        Examples:
            >>> Config(api_url="https://shop.example.com/api").missing_settings()
            ['CSCART_API_EMAIL', 'CSCART_API_KEY']
        """
        return [ENV_VARS[name] for name in REQUIRED_FIELDS if not getattr(self, name)]

    def require_credentials(self) -> None:
        """Raise ConfigurationError if any upstream setting is missing."""
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )

    def is_valid_for_mode(self) -> tuple[bool, str]:
        """
        Check if config is valid for current mode.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(mode="http", http_port=80).is_valid_for_mode()
            (True, '')

            >>> Config(mode="http", http_port=70000).is_valid_for_mode()
            (False, 'Port must be between 1 and 65535')
        """
        if self.mode == "stdio":
            return True, ""
        if self.mode == "http":
            if not (1 <= self.http_port <= 65535):
                return False, "Port must be between 1 and 65535"
            if not self.http_path.startswith("/"):
                return False, "HTTP path must start with '/'"
            return True, ""
        return False, f"Unknown mode: {self.mode}"

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Only includes keys that are actual dataclass fields, ignoring
        any extra keys in the input dict.

        Examples:
            >>> Config.from_dict({"http_port": 8080}).http_port
            8080

            >>> Config.from_dict({"unknown_field": "ignored"}).mode
            'stdio'
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build config from environment variables (see ENV_VARS).

        Unset or blank variables fall back to the dataclass defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigurationError: If MCP_HTTP_PORT is not an integer.
        """
        if environ is None:
            environ = os.environ

        data: dict = {}
        for name, var in ENV_VARS.items():
            value = environ.get(var, "").strip()
            if value:
                data[name] = value

        if "http_port" in data:
            try:
                data["http_port"] = int(data["http_port"])
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_VARS['http_port']} must be an integer, got {data['http_port']!r}"
                )

        if "cors_origins" in data:
            data["cors_origins"] = [
                origin.strip() for origin in data["cors_origins"].split(",") if origin.strip()
            ]

        if "log_level" in data:
            data["log_level"] = data["log_level"].upper()

        if "mode" in data:
            data["mode"] = data["mode"].lower()

        return cls.from_dict(data)
