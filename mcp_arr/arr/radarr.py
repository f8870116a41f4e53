"""Radarr (movies) endpoints."""

from __future__ import annotations

from typing import Any

from .client import ArrClient


async def list_movies(client: ArrClient) -> list[dict[str, Any]]:
    return await client.request("/movie")


async def get_movie(client: ArrClient, movie_id: int) -> dict[str, Any]:
    return await client.request(f"/movie/{movie_id}")


async def lookup_movies(client: ArrClient, term: str) -> list[dict[str, Any]]:
    return await client.request("/movie/lookup", params={"term": term})


async def add_movie(
    client: ArrClient,
    *,
    tmdb_id: int,
    root_folder_path: str,
    quality_profile_id: int,
    monitored: bool = True,
    **fields: Any,
) -> dict[str, Any]:
    body = {
        **fields,
        "tmdbId": tmdb_id,
        "rootFolderPath": root_folder_path,
        "qualityProfileId": quality_profile_id,
        "monitored": monitored,
        "addOptions": {"searchForMovie": True},
    }
    return await client.request("/movie", method="POST", body=body)


async def search_movie(client: ArrClient, movie_id: int) -> dict[str, Any]:
    return await client.run_command("MoviesSearch", movieIds=[movie_id])


__all__ = ["list_movies", "get_movie", "lookup_movies", "add_movie", "search_movie"]
