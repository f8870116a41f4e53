"""Radarr (movies) library tools."""

from __future__ import annotations

from typing import Annotated, TYPE_CHECKING

from pydantic import Field

from ...arr import radarr
from ...arr.families import ServiceFamily
from .. import formatting
from ..models import (
    AddedItemResponse,
    CommandResponse,
    MovieLookupResponse,
    MoviesResponse,
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


def register_radarr_tools(server: "ArrServer") -> None:
    """Register the movie library tools on *server*."""

    family = ServiceFamily.RADARR

    def _radarr_tool(suffix: str, *, title: str):
        return family_tool(server, family, suffix, title=title, category="library")

    @_radarr_tool("get_movies", title="List movies")
    async def get_movies() -> MoviesResponse:
        """Get all movies in Radarr library"""

        movies = await radarr.list_movies(server.require_client(family))
        return MoviesResponse(
            count=len(movies), movies=[formatting.summarize_movie(m) for m in movies]
        )

    @_radarr_tool("search", title="Search movies")
    async def search(term: SearchTerm) -> MovieLookupResponse:
        """Search for movies to add to Radarr"""

        results = await radarr.lookup_movies(server.require_client(family), term)
        return MovieLookupResponse(
            count=len(results),
            results=[
                formatting.summarize_movie_lookup(r)
                for r in results[: formatting.SEARCH_RESULT_LIMIT]
            ],
        )

    @_radarr_tool("search_movie", title="Search for a movie download")
    async def search_movie(
        movie_id: Annotated[int, Field(description="Movie ID to search for", ge=1)],
    ) -> CommandResponse:
        """Trigger a search to download a movie that's already in your library"""

        result = await radarr.search_movie(server.require_client(family), movie_id)
        return command_response(result, "Search triggered for movie")

    @_radarr_tool("add_movie", title="Add movie")
    async def add_movie(
        tmdb_id: Annotated[int, Field(description="TMDb id from radarr_search", ge=1)],
        root_folder_path: RootFolderPath,
        quality_profile_id: QualityProfileId,
        title: Annotated[str | None, Field(description="Movie title")] = None,
        monitored: Monitored = True,
    ) -> AddedItemResponse:
        """Add a movie to Radarr and start searching for it"""

        extra = {"title": title} if title else {}
        added = await radarr.add_movie(
            server.require_client(family),
            tmdb_id=tmdb_id,
            root_folder_path=root_folder_path,
            quality_profile_id=quality_profile_id,
            monitored=monitored,
            **extra,
        )
        return formatting.summarize_added(added)


__all__ = ["register_radarr_tools"]
