"""Command line interface for :mod:`mcp_arr.server`."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass

from . import ArrServer, server, settings


logger = logging.getLogger(__name__)

arr_server: ArrServer = server

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "notset")


@dataclass
class RunConfig:
    """Keyword arguments handed to ``FastMCP.run`` for HTTP transports."""

    host: str | None = None
    port: int | None = None
    path: str | None = None

    def to_kwargs(self) -> dict[str, object]:
        values = {"host": self.host, "port": self.port, "path": self.path or None}
        return {key: value for key, value in values.items() if value is not None}


def _build_parser() -> argparse.ArgumentParser:
    services = ", ".join(
        f"{name}_URL/{name}_API_KEY"
        for name in ("SONARR", "RADARR", "LIDARR", "READARR", "PROWLARR")
    )
    parser = argparse.ArgumentParser(
        description=f"Run the *arr MCP server. Services are configured through {services}."
    )
    parser.add_argument(
        "--transport",
        choices=list(TRANSPORTS),
        default="stdio",
        help="Transport protocol (env: MCP_TRANSPORT)",
    )
    parser.add_argument("--bind", help="Host address for HTTP transports (env: MCP_HOST or MCP_BIND)")
    parser.add_argument("--port", type=int, help="Port for HTTP transports (env: MCP_PORT)")
    parser.add_argument("--mount", help="Mount path for HTTP transports (env: MCP_MOUNT)")
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=list(LOG_LEVELS),
        help="Logging verbosity (env: LOG_LEVEL)",
    )
    return parser


def _env_port(parser: argparse.ArgumentParser) -> int | None:
    raw = os.getenv("MCP_PORT")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        parser.error("MCP_PORT must be an integer")


def _transport_options(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> tuple[str, RunConfig]:
    """Merge ``MCP_*`` environment overrides over the parsed arguments; the environment wins."""

    transport = os.getenv("MCP_TRANSPORT") or args.transport
    if transport not in TRANSPORTS:
        parser.error(
            f"transport must be one of {', '.join(TRANSPORTS)} (via --transport or MCP_TRANSPORT)"
        )

    env_host = os.getenv("MCP_HOST")
    if env_host is None:
        env_host = os.getenv("MCP_BIND")
    host = env_host or args.bind
    port = _env_port(parser)
    if port is None:
        port = args.port
    mount = os.getenv("MCP_MOUNT") or args.mount

    if transport == "stdio":
        if mount:
            parser.error("--mount or MCP_MOUNT is not allowed when transport is stdio")
        return transport, RunConfig()
    if host is None or port is None:
        parser.error(
            "--bind/--port or MCP_HOST/MCP_PORT are required when transport is not stdio"
        )
    return transport, RunConfig(host=host, port=port, path=mount)


def _log_level(cli_value: str | None) -> int:
    name = cli_value or (os.getenv("LOG_LEVEL") or "info").lower()
    return getattr(logging, name.upper(), logging.INFO)


def main(argv: list[str] | None = None) -> None:
    """Parse *argv*, configure logging and serve until the transport exits."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    transport, run_config = _transport_options(parser, args)

    families = settings.configured_families()
    if not families:
        parser.error(
            "no *arr service is configured; set at least one <SERVICE>_URL and "
            "<SERVICE>_API_KEY pair"
        )

    logging.basicConfig(level=_log_level(args.log_level))
    logger.info(
        "Starting mcp-arr over %s for %s",
        transport,
        ", ".join(family.value for family in families),
    )

    arr_server.run(transport=transport, **run_config.to_kwargs())


__all__ = ["RunConfig", "main", "server", "ArrServer", "arr_server", "settings"]
