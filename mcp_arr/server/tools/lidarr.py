"""Lidarr (music) library tools."""

from __future__ import annotations

from typing import Annotated, TYPE_CHECKING

from pydantic import Field

from ...arr import lidarr
from ...arr.families import ServiceFamily
from .. import formatting
from ..models import (
    AddedItemResponse,
    AlbumsResponse,
    ArtistLookupResponse,
    ArtistsResponse,
    CommandResponse,
)
from .common import (
    MetadataProfileId,
    Monitored,
    QualityProfileId,
    RootFolderPath,
    SearchTerm,
    command_response,
    family_tool,
)

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


ArtistId = Annotated[int, Field(description="Lidarr artist id", ge=1)]


def register_lidarr_tools(server: "ArrServer") -> None:
    """Register the music library tools on *server*."""

    family = ServiceFamily.LIDARR

    def _lidarr_tool(suffix: str, *, title: str):
        return family_tool(server, family, suffix, title=title, category="library")

    @_lidarr_tool("get_artists", title="List artists")
    async def get_artists() -> ArtistsResponse:
        """Get all artists in Lidarr library"""

        artists = await lidarr.list_artists(server.require_client(family))
        return ArtistsResponse(
            count=len(artists),
            artists=[formatting.summarize_artist(a) for a in artists],
        )

    @_lidarr_tool("search", title="Search artists")
    async def search(term: SearchTerm) -> ArtistLookupResponse:
        """Search for artists to add to Lidarr"""

        results = await lidarr.lookup_artists(server.require_client(family), term)
        return ArtistLookupResponse(
            count=len(results),
            results=[
                formatting.summarize_artist_lookup(r)
                for r in results[: formatting.SEARCH_RESULT_LIMIT]
            ],
        )

    @_lidarr_tool("get_albums", title="List albums")
    async def get_albums(artist_id: ArtistId) -> AlbumsResponse:
        """Get albums for an artist in Lidarr. Shows which albums are available and which are missing."""

        albums = await lidarr.list_albums(server.require_client(family), artist_id)
        return AlbumsResponse(
            count=len(albums), albums=[formatting.summarize_album(a) for a in albums]
        )

    @_lidarr_tool("search_album", title="Search for an album download")
    async def search_album(
        album_id: Annotated[int, Field(description="Album ID to search for", ge=1)],
    ) -> CommandResponse:
        """Trigger a search for a specific album to download"""

        result = await lidarr.search_album(server.require_client(family), album_id)
        return command_response(result, "Search triggered for album")

    @_lidarr_tool("search_missing", title="Search missing albums")
    async def search_missing(artist_id: ArtistId) -> CommandResponse:
        """Trigger a search for all missing albums for an artist"""

        result = await lidarr.search_missing_albums(
            server.require_client(family), artist_id
        )
        return command_response(result, "Search triggered for missing albums")

    @_lidarr_tool("add_artist", title="Add artist")
    async def add_artist(
        foreign_artist_id: Annotated[
            str, Field(description="MusicBrainz artist id from lidarr_search")
        ],
        root_folder_path: RootFolderPath,
        quality_profile_id: QualityProfileId,
        metadata_profile_id: MetadataProfileId,
        artist_name: Annotated[str | None, Field(description="Artist name")] = None,
        monitored: Monitored = True,
    ) -> AddedItemResponse:
        """Add an artist to Lidarr and start searching for missing albums"""

        extra = {"artistName": artist_name} if artist_name else {}
        added = await lidarr.add_artist(
            server.require_client(family),
            foreign_artist_id=foreign_artist_id,
            root_folder_path=root_folder_path,
            quality_profile_id=quality_profile_id,
            metadata_profile_id=metadata_profile_id,
            monitored=monitored,
            **extra,
        )
        return formatting.summarize_added(added)


__all__ = ["register_lidarr_tools"]
