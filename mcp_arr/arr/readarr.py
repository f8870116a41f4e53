"""Readarr (books) endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from .client import ArrClient


async def list_authors(client: ArrClient) -> list[dict[str, Any]]:
    return await client.request("/author")


async def get_author(client: ArrClient, author_id: int) -> dict[str, Any]:
    return await client.request(f"/author/{author_id}")


async def lookup_authors(client: ArrClient, term: str) -> list[dict[str, Any]]:
    return await client.request("/author/lookup", params={"term": term})


async def add_author(
    client: ArrClient,
    *,
    foreign_author_id: str,
    root_folder_path: str,
    quality_profile_id: int,
    metadata_profile_id: int,
    monitored: bool = True,
    **fields: Any,
) -> dict[str, Any]:
    body = {
        **fields,
        "foreignAuthorId": foreign_author_id,
        "rootFolderPath": root_folder_path,
        "qualityProfileId": quality_profile_id,
        "metadataProfileId": metadata_profile_id,
        "monitored": monitored,
        "addOptions": {"searchForMissingBooks": True},
    }
    return await client.request("/author", method="POST", body=body)


async def list_books(
    client: ArrClient, author_id: int | None = None
) -> list[dict[str, Any]]:
    params = {"authorId": author_id} if author_id else None
    return await client.request("/book", params=params)


async def get_book(client: ArrClient, book_id: int) -> dict[str, Any]:
    return await client.request(f"/book/{book_id}")


async def search_missing_books(client: ArrClient, author_id: int) -> dict[str, Any]:
    return await client.run_command("AuthorSearch", authorId=author_id)


async def search_books(client: ArrClient, book_ids: Sequence[int]) -> dict[str, Any]:
    return await client.run_command("BookSearch", bookIds=list(book_ids))


__all__ = [
    "list_authors",
    "get_author",
    "lookup_authors",
    "add_author",
    "list_books",
    "get_book",
    "search_missing_books",
    "search_books",
]
