"""Lidarr (music) endpoints."""

from __future__ import annotations

from typing import Any

from .client import ArrClient


async def list_artists(client: ArrClient) -> list[dict[str, Any]]:
    return await client.request("/artist")


async def get_artist(client: ArrClient, artist_id: int) -> dict[str, Any]:
    return await client.request(f"/artist/{artist_id}")


async def lookup_artists(client: ArrClient, term: str) -> list[dict[str, Any]]:
    return await client.request("/artist/lookup", params={"term": term})


async def add_artist(
    client: ArrClient,
    *,
    foreign_artist_id: str,
    root_folder_path: str,
    quality_profile_id: int,
    metadata_profile_id: int,
    monitored: bool = True,
    **fields: Any,
) -> dict[str, Any]:
    body = {
        **fields,
        "foreignArtistId": foreign_artist_id,
        "rootFolderPath": root_folder_path,
        "qualityProfileId": quality_profile_id,
        "metadataProfileId": metadata_profile_id,
        "monitored": monitored,
        "addOptions": {"searchForMissingAlbums": True},
    }
    return await client.request("/artist", method="POST", body=body)


async def list_albums(
    client: ArrClient, artist_id: int | None = None
) -> list[dict[str, Any]]:
    """Return albums, limited to one artist when *artist_id* is given."""

    params = {"artistId": artist_id} if artist_id else None
    return await client.request("/album", params=params)


async def get_album(client: ArrClient, album_id: int) -> dict[str, Any]:
    return await client.request(f"/album/{album_id}")


async def search_missing_albums(client: ArrClient, artist_id: int) -> dict[str, Any]:
    return await client.run_command("ArtistSearch", artistId=artist_id)


async def search_album(client: ArrClient, album_id: int) -> dict[str, Any]:
    return await client.run_command("AlbumSearch", albumIds=[album_id])


__all__ = [
    "list_artists",
    "get_artist",
    "lookup_artists",
    "add_artist",
    "list_albums",
    "get_album",
    "search_missing_albums",
    "search_album",
]
