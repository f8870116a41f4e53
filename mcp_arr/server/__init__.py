"""FastMCP server exposing Sonarr, Radarr, Lidarr, Readarr and Prowlarr tools."""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any, Mapping, TYPE_CHECKING

import httpx
from fastmcp.server import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from ..arr.client import ArrClient
from ..arr.errors import ArrConfigurationError
from ..arr.families import ServiceFamily
from .config import Settings
from .tools import register_tools


logger = logging.getLogger(__name__)


settings = Settings()
SERVER_NAME = "mcp-arr"

INSTRUCTIONS = (
    "Tools for managing a home media stack built on the *arr applications. "
    "Tool names are prefixed with the service they talk to (sonarr_, radarr_, "
    "lidarr_, readarr_, prowlarr_); arr_status and arr_search_all span every "
    "configured service. Only services configured with a URL and API key "
    "expose tools."
)


try:
    __version__ = importlib.metadata.version("mcp-arr")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"


class ArrServer(FastMCP):
    """FastMCP server holding one API client per configured service."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:  # noqa: D401 - short description inherited
        self._arr_settings = settings or Settings()
        self._http_transport = transport
        self._arr_clients: dict[ServiceFamily, ArrClient] = {
            family: ArrClient(
                config,
                transport=transport,
                timeout=self._arr_settings.request_timeout,
            )
            for family, config in self._arr_settings.service_configs().items()
        }

        class _ServerLifespan:
            def __init__(self, arr_server: "ArrServer") -> None:
                self._arr_server = arr_server

            async def __aenter__(self) -> None:  # noqa: D401 - matching protocol
                return None

            async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
                await self._arr_server.close()

        def _lifespan(app: FastMCP) -> _ServerLifespan:  # noqa: ARG001
            return _ServerLifespan(self)

        super().__init__(name=SERVER_NAME, instructions=INSTRUCTIONS, lifespan=_lifespan)
        register_tools(self)
        self.custom_route("/health", methods=["GET"])(self._health)

        if self._arr_clients:
            logger.info(
                "Configured *arr services: %s",
                ", ".join(family.value for family in self._arr_clients),
            )
        else:
            logger.warning("No *arr services are configured; only status tools are available")

    @property
    def arr_settings(self) -> Settings:
        return self._arr_settings

    @property
    def clients(self) -> Mapping[ServiceFamily, ArrClient]:
        return dict(self._arr_clients)

    @property
    def configured_families(self) -> list[ServiceFamily]:
        return list(self._arr_clients)

    def is_available(self, family: ServiceFamily) -> bool:
        return family in self._arr_clients

    def require_client(self, family: ServiceFamily) -> ArrClient:
        """Return the client for *family* or fail before any request is sent."""

        client = self._arr_clients.get(family)
        if client is None:
            raise ArrConfigurationError(f"{family.value} is not configured")
        return client

    async def close(self) -> None:
        for client in self._arr_clients.values():
            await client.close()

    async def _health(self, request: Request) -> Response:  # noqa: ARG002
        return JSONResponse(
            {
                "status": "ok",
                "version": __version__,
                "services": [family.value for family in self._arr_clients],
            }
        )


server = ArrServer(settings=settings)


def main(argv: list[str] | None = None) -> None:
    """Entry point retained for ``python -m mcp_arr.server``."""

    from .cli import main as cli_main

    cli_main(argv)


if __name__ == "__main__":
    main()


if TYPE_CHECKING:
    from .cli import RunConfig as RunConfig


def __getattr__(name: str) -> Any:
    if name == "RunConfig":
        from .cli import RunConfig as _RunConfig

        return _RunConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ArrServer",
    "SERVER_NAME",
    "server",
    "settings",
    "main",
    "RunConfig",
]
