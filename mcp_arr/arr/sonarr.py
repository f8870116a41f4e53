"""Sonarr (TV) endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from .client import ArrClient


async def list_series(client: ArrClient) -> list[dict[str, Any]]:
    return await client.request("/series")


async def get_series(client: ArrClient, series_id: int) -> dict[str, Any]:
    return await client.request(f"/series/{series_id}")


async def lookup_series(client: ArrClient, term: str) -> list[dict[str, Any]]:
    """Search the remote metadata source for series not yet in the library."""

    return await client.request("/series/lookup", params={"term": term})


async def add_series(
    client: ArrClient,
    *,
    tvdb_id: int,
    root_folder_path: str,
    quality_profile_id: int,
    monitored: bool = True,
    season_folder: bool = True,
    **fields: Any,
) -> dict[str, Any]:
    body = {
        **fields,
        "tvdbId": tvdb_id,
        "rootFolderPath": root_folder_path,
        "qualityProfileId": quality_profile_id,
        "monitored": monitored,
        "seasonFolder": season_folder,
        "addOptions": {"searchForMissingEpisodes": True},
    }
    return await client.request("/series", method="POST", body=body)


async def get_episodes(
    client: ArrClient, series_id: int, season_number: int | None = None
) -> list[dict[str, Any]]:
    params: dict[str, int] = {"seriesId": series_id}
    if season_number is not None:
        params["seasonNumber"] = season_number
    return await client.request("/episode", params=params)


async def search_missing_episodes(client: ArrClient, series_id: int) -> dict[str, Any]:
    return await client.run_command("SeriesSearch", seriesId=series_id)


async def search_episodes(
    client: ArrClient, episode_ids: Sequence[int]
) -> dict[str, Any]:
    return await client.run_command("EpisodeSearch", episodeIds=list(episode_ids))


__all__ = [
    "list_series",
    "get_series",
    "lookup_series",
    "add_series",
    "get_episodes",
    "search_missing_episodes",
    "search_episodes",
]
