"""Tool registration for the *arr MCP server."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...arr.families import ServiceFamily
from .activity import register_activity_tools
from .configuration import register_configuration_tools
from .lidarr import register_lidarr_tools
from .overview import register_overview_tools
from .prowlarr import register_prowlarr_tools
from .radarr import register_radarr_tools
from .readarr import register_readarr_tools
from .sonarr import register_sonarr_tools

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


_FAMILY_REGISTRARS = {
    ServiceFamily.SONARR: register_sonarr_tools,
    ServiceFamily.RADARR: register_radarr_tools,
    ServiceFamily.LIDARR: register_lidarr_tools,
    ServiceFamily.READARR: register_readarr_tools,
    ServiceFamily.PROWLARR: register_prowlarr_tools,
}


def register_tools(server: "ArrServer") -> None:
    """Register every tool whose backing service is configured."""

    register_overview_tools(server)
    register_configuration_tools(server)
    register_activity_tools(server)
    for family, register in _FAMILY_REGISTRARS.items():
        if server.is_available(family):
            register(server)


__all__ = [
    "register_tools",
    "register_activity_tools",
    "register_configuration_tools",
    "register_overview_tools",
    "register_sonarr_tools",
    "register_radarr_tools",
    "register_lidarr_tools",
    "register_readarr_tools",
    "register_prowlarr_tools",
]
