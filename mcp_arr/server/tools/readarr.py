"""Readarr (books) library tools."""

from __future__ import annotations

from typing import Annotated, TYPE_CHECKING

from pydantic import Field

from ...arr import readarr
from ...arr.families import ServiceFamily
from .. import formatting
from ..models import (
    AddedItemResponse,
    AuthorLookupResponse,
    AuthorsResponse,
    BooksResponse,
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


AuthorId = Annotated[int, Field(description="Readarr author id", ge=1)]


def register_readarr_tools(server: "ArrServer") -> None:
    """Register the book library tools on *server*."""

    family = ServiceFamily.READARR

    def _readarr_tool(suffix: str, *, title: str):
        return family_tool(server, family, suffix, title=title, category="library")

    @_readarr_tool("get_authors", title="List authors")
    async def get_authors() -> AuthorsResponse:
        """Get all authors in Readarr library"""

        authors = await readarr.list_authors(server.require_client(family))
        return AuthorsResponse(
            count=len(authors),
            authors=[formatting.summarize_author(a) for a in authors],
        )

    @_readarr_tool("search", title="Search authors")
    async def search(term: SearchTerm) -> AuthorLookupResponse:
        """Search for authors to add to Readarr"""

        results = await readarr.lookup_authors(server.require_client(family), term)
        return AuthorLookupResponse(
            count=len(results),
            results=[
                formatting.summarize_author_lookup(r)
                for r in results[: formatting.SEARCH_RESULT_LIMIT]
            ],
        )

    @_readarr_tool("get_books", title="List books")
    async def get_books(author_id: AuthorId) -> BooksResponse:
        """Get books for an author in Readarr. Shows which books are available and which are missing."""

        books = await readarr.list_books(server.require_client(family), author_id)
        return BooksResponse(
            count=len(books), books=[formatting.summarize_book(b) for b in books]
        )

    @_readarr_tool("search_book", title="Search books")
    async def search_book(
        book_ids: Annotated[
            list[int], Field(description="Book ID(s) to search for", min_length=1)
        ],
    ) -> CommandResponse:
        """Trigger a search for a specific book to download"""

        result = await readarr.search_books(server.require_client(family), book_ids)
        return command_response(result, f"Search triggered for {len(book_ids)} book(s)")

    @_readarr_tool("search_missing", title="Search missing books")
    async def search_missing(author_id: AuthorId) -> CommandResponse:
        """Trigger a search for all missing books for an author"""

        result = await readarr.search_missing_books(
            server.require_client(family), author_id
        )
        return command_response(result, "Search triggered for missing books")

    @_readarr_tool("add_author", title="Add author")
    async def add_author(
        foreign_author_id: Annotated[
            str, Field(description="Foreign author id from readarr_search")
        ],
        root_folder_path: RootFolderPath,
        quality_profile_id: QualityProfileId,
        metadata_profile_id: MetadataProfileId,
        author_name: Annotated[str | None, Field(description="Author name")] = None,
        monitored: Monitored = True,
    ) -> AddedItemResponse:
        """Add an author to Readarr and start searching for missing books"""

        extra = {"authorName": author_name} if author_name else {}
        added = await readarr.add_author(
            server.require_client(family),
            foreign_author_id=foreign_author_id,
            root_folder_path=root_folder_path,
            quality_profile_id=quality_profile_id,
            metadata_profile_id=metadata_profile_id,
            monitored=monitored,
            **extra,
        )
        return formatting.summarize_added(added)


__all__ = ["register_readarr_tools"]
