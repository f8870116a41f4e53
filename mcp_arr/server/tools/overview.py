"""Cross-service tools: connection status and combined lookups."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, TYPE_CHECKING

from ...arr import lidarr, radarr, readarr, sonarr
from ...arr.client import ArrClient
from ...arr.errors import ArrError
from ...arr.families import ServiceFamily
from ..models import (
    ArrStatusResponse,
    FamilySearchResults,
    SearchAllResponse,
    ServiceStatus,
)
from .common import SearchTerm

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


logger = logging.getLogger(__name__)

SEARCH_ALL_LIMIT = 5

_LOOKUPS: dict[ServiceFamily, Callable[[ArrClient, str], Awaitable[list[dict[str, Any]]]]] = {
    ServiceFamily.SONARR: sonarr.lookup_series,
    ServiceFamily.RADARR: radarr.lookup_movies,
    ServiceFamily.LIDARR: lidarr.lookup_artists,
    ServiceFamily.READARR: readarr.lookup_authors,
}


async def _service_status(client: ArrClient) -> ServiceStatus:
    try:
        status = await client.get_system_status()
    except ArrError as exc:
        logger.warning("Status check for %s failed: %s", client.service, exc)
        return ServiceStatus(configured=True, connected=False, error=str(exc))
    return ServiceStatus(
        configured=True,
        connected=True,
        version=status.get("version"),
        app_name=status.get("appName"),
    )


async def _family_lookup(
    family: ServiceFamily, client: ArrClient, term: str
) -> FamilySearchResults:
    try:
        results = await _LOOKUPS[family](client, term)
    except ArrError as exc:
        logger.warning("Lookup of %r on %s failed: %s", term, family.value, exc)
        return FamilySearchResults(error=str(exc))
    return FamilySearchResults(
        count=len(results), results=list(results[:SEARCH_ALL_LIMIT])
    )


def register_overview_tools(server: "ArrServer") -> None:
    """Register the tools that span every configured service."""

    @server.tool(
        "arr_status",
        title="Service status",
        meta={"category": "overview"},
    )
    async def arr_status() -> ArrStatusResponse:
        """Get status of all configured *arr services"""

        configured = [f for f in ServiceFamily if server.is_available(f)]
        statuses = await asyncio.gather(
            *(_service_status(server.require_client(f)) for f in configured)
        )
        by_family = dict(zip(configured, statuses))
        return ArrStatusResponse(
            services={
                family.value: by_family.get(family, ServiceStatus(configured=False))
                for family in ServiceFamily
            }
        )

    @server.tool(
        "arr_search_all",
        title="Search all libraries",
        meta={"category": "overview"},
    )
    async def arr_search_all(term: SearchTerm) -> SearchAllResponse:
        """Search across all configured *arr services for any media"""

        families = [f for f in _LOOKUPS if server.is_available(f)]
        results = await asyncio.gather(
            *(_family_lookup(f, server.require_client(f), term) for f in families)
        )
        return SearchAllResponse(
            term=term,
            services={family.value: result for family, result in zip(families, results)},
        )


__all__ = ["SEARCH_ALL_LIMIT", "register_overview_tools"]
