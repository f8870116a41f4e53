"""Prowlarr indexer tools."""

from __future__ import annotations

import asyncio
from typing import Annotated, TYPE_CHECKING

from pydantic import Field

from ...arr import prowlarr
from ...arr.families import ServiceFamily
from .. import formatting
from ..models import (
    IndexersResponse,
    IndexerStatsResponse,
    IndexerTestResponse,
    ReleaseSearchResponse,
)
from .common import family_tool

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


def register_prowlarr_tools(server: "ArrServer") -> None:
    """Register the indexer tools on *server*."""

    family = ServiceFamily.PROWLARR

    def _prowlarr_tool(suffix: str, *, title: str):
        return family_tool(server, family, suffix, title=title, category="indexers")

    @_prowlarr_tool("get_indexers", title="List indexers")
    async def get_indexers() -> IndexersResponse:
        """Get all configured indexers in Prowlarr"""

        indexers = await prowlarr.list_indexers(server.require_client(family))
        return IndexersResponse(
            count=len(indexers),
            indexers=[formatting.summarize_indexer(i) for i in indexers],
        )

    @_prowlarr_tool("search", title="Search indexers")
    async def search(
        query: Annotated[str, Field(description="Search query", min_length=1)],
        categories: Annotated[
            list[int] | None,
            Field(description="Optional Newznab category ids, e.g. 2000 for movies"),
        ] = None,
    ) -> ReleaseSearchResponse:
        """Search across all Prowlarr indexers"""

        results = await prowlarr.search(server.require_client(family), query, categories)
        return ReleaseSearchResponse(count=len(results), results=results)

    @_prowlarr_tool("test_indexers", title="Test indexers")
    async def test_indexers() -> IndexerTestResponse:
        """Test all indexers and return their health status"""

        client = server.require_client(family)
        results, indexers = await asyncio.gather(
            prowlarr.test_all_indexers(client), prowlarr.list_indexers(client)
        )
        names = {indexer.get("id"): indexer.get("name") for indexer in indexers}
        summaries = [formatting.summarize_indexer_test(r, names) for r in results]
        healthy = sum(1 for summary in summaries if summary.is_valid)
        return IndexerTestResponse(
            count=len(summaries),
            indexers=summaries,
            healthy=healthy,
            failed=len(summaries) - healthy,
        )

    @_prowlarr_tool("get_stats", title="Indexer statistics")
    async def get_stats() -> IndexerStatsResponse:
        """Get indexer statistics (queries, grabs, failures)"""

        stats = await prowlarr.get_indexer_stats(server.require_client(family))
        return formatting.summarize_indexer_stats(stats)


__all__ = ["register_prowlarr_tools"]
