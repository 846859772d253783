"""CLI entrypoint for the CS-Cart MCP server."""
from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import Config, ConfigurationError
from .mcp_server import McpServer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cscart-mcp-server", description="CS-Cart MCP Server")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Start MCP server (default)")
    serve.add_argument(
        "--transport",
        choices=["stdio", "http"],
        help="Override MCP_TRANSPORT",
    )
    serve.add_argument("--host", help="Override MCP_HTTP_HOST (http transport only)")
    serve.add_argument("--port", type=int, help="Override MCP_HTTP_PORT (http transport only)")

    sub.add_parser("check", help="Verify required configuration is present and exit")
    return p


def _configure_logging(level: str) -> None:
    # stdout carries the stdio transport; logs must go to stderr
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def preflight(config: Config) -> list[str]:
    """Return a list of configuration problems; empty means ready to serve."""
    problems = [f"{name} is not set" for name in config.missing_settings()]
    is_valid, error = config.is_valid_for_mode()
    if not is_valid:
        problems.append(error)
    return problems


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.command == "serve":
        if args.transport:
            config.mode = args.transport
        if args.host:
            config.http_host = args.host
        if args.port is not None:
            config.http_port = args.port

    _configure_logging(config.log_level)

    problems = preflight(config)
    for problem in problems:
        logger.error("Configuration error: %s", problem)

    if args.command == "check":
        if not problems:
            print("Configuration OK", file=sys.stderr)
        return 1 if problems else 0

    if problems:
        return 1

    McpServer(config).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
