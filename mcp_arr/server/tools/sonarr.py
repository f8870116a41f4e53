"""Sonarr (TV) library tools."""

from __future__ import annotations

from typing import Annotated, TYPE_CHECKING

from pydantic import Field

from ...arr import sonarr
from ...arr.families import ServiceFamily
from .. import formatting
from ..models import (
    AddedItemResponse,
    CommandResponse,
    EpisodesResponse,
    SeriesListResponse,
    SeriesLookupResponse,
)
from .common import (
    Monitored,
    QualityProfileId,
    RootFolderPath,
    SearchTerm,
    command_response,
    family_tool,
)

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


SeriesId = Annotated[int, Field(description="Sonarr series id", ge=1, examples=[12])]


def register_sonarr_tools(server: "ArrServer") -> None:
    """Register the TV library tools on *server*."""

    family = ServiceFamily.SONARR

    def _sonarr_tool(suffix: str, *, title: str):
        return family_tool(server, family, suffix, title=title, category="library")

    @_sonarr_tool("get_series", title="List TV series")
    async def get_series() -> SeriesListResponse:
        """Get all TV series in Sonarr library"""

        series = await sonarr.list_series(server.require_client(family))
        return SeriesListResponse(
            count=len(series),
            series=[formatting.summarize_series(s) for s in series],
        )

    @_sonarr_tool("search", title="Search TV series")
    async def search(term: SearchTerm) -> SeriesLookupResponse:
        """Search for TV series to add to Sonarr"""

        results = await sonarr.lookup_series(server.require_client(family), term)
        return SeriesLookupResponse(
            count=len(results),
            results=[
                formatting.summarize_series_lookup(r)
                for r in results[: formatting.SEARCH_RESULT_LIMIT]
            ],
        )

    @_sonarr_tool("get_episodes", title="List episodes")
    async def get_episodes(
        series_id: SeriesId,
        season_number: Annotated[
            int | None,
            Field(description="Optional: filter to a specific season", ge=0),
        ] = None,
    ) -> EpisodesResponse:
        """Get episodes for a TV series. Shows which episodes are available and which are missing."""

        episodes = await sonarr.get_episodes(
            server.require_client(family), series_id, season_number
        )
        return EpisodesResponse(
            count=len(episodes),
            episodes=[formatting.summarize_episode(e) for e in episodes],
        )

    @_sonarr_tool("search_missing", title="Search missing episodes")
    async def search_missing(series_id: SeriesId) -> CommandResponse:
        """Trigger a search for all missing episodes in a series"""

        result = await sonarr.search_missing_episodes(
            server.require_client(family), series_id
        )
        return command_response(result, "Search triggered for missing episodes")

    @_sonarr_tool("search_episode", title="Search episodes")
    async def search_episode(
        episode_ids: Annotated[
            list[int],
            Field(description="Episode ID(s) to search for", min_length=1),
        ],
    ) -> CommandResponse:
        """Trigger a search for specific episode(s)"""

        result = await sonarr.search_episodes(server.require_client(family), episode_ids)
        return command_response(
            result, f"Search triggered for {len(episode_ids)} episode(s)"
        )

    @_sonarr_tool("add_series", title="Add TV series")
    async def add_series(
        tvdb_id: Annotated[int, Field(description="TVDB id from sonarr_search", ge=1)],
        root_folder_path: RootFolderPath,
        quality_profile_id: QualityProfileId,
        title: Annotated[str | None, Field(description="Series title")] = None,
        monitored: Monitored = True,
    ) -> AddedItemResponse:
        """Add a TV series to Sonarr and start searching for missing episodes"""

        extra = {"title": title} if title else {}
        added = await sonarr.add_series(
            server.require_client(family),
            tvdb_id=tvdb_id,
            root_folder_path=root_folder_path,
            quality_profile_id=quality_profile_id,
            monitored=monitored,
            **extra,
        )
        return formatting.summarize_added(added)


__all__ = ["register_sonarr_tools"]
