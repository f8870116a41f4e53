"""Prowlarr (indexer manager) endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from .client import ArrClient


async def list_indexers(client: ArrClient) -> list[dict[str, Any]]:
    return await client.get_indexers()


async def test_all_indexers(client: ArrClient) -> list[dict[str, Any]]:
    """Ask Prowlarr to test every indexer; returns ``isValid`` per indexer id."""

    return await client.request("/indexer/testall", method="POST")


async def test_indexer(client: ArrClient, indexer_id: int) -> dict[str, Any]:
    return await client.request(f"/indexer/{indexer_id}/test", method="POST")


async def get_indexer_stats(client: ArrClient) -> dict[str, Any]:
    return await client.request("/indexerstats")


async def search(
    client: ArrClient, query: str, categories: Sequence[int] | None = None
) -> list[dict[str, Any]]:
    params: list[tuple[str, Any]] = [("query", query)]
    for category in categories or ():
        params.append(("categories", category))
    return await client.request("/search", params=params)


__all__ = [
    "list_indexers",
    "test_all_indexers",
    "test_indexer",
    "get_indexer_stats",
    "search",
]
