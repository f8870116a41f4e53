"""Helpers reshaping raw *arr API payloads into tool responses."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.text import format_bytes, truncate
from .models import (
    AddedItemResponse,
    AlbumSummary,
    ArtistLookupResult,
    ArtistSummary,
    AuthorLookupResult,
    AuthorSummary,
    BookSummary,
    CustomFormatScore,
    DownloadClientSummary,
    EpisodeSummary,
    HealthIssue,
    HealthResponse,
    IndexerStatsResponse,
    IndexerStatsSummary,
    IndexerStatsTotals,
    IndexerSummary,
    IndexerTestResult,
    MovieLookupResult,
    MovieSummary,
    QualityProfileSummary,
    QueueItemSummary,
    QueueResponse,
    RootFolderSummary,
    SeriesLookupResult,
    SeriesSummary,
    TagSummary,
)

Payload = Mapping[str, Any]

SEARCH_RESULT_LIMIT = 10
OVERVIEW_LIMIT = 200


def _statistics(item: Payload) -> Payload:
    stats = item.get("statistics")
    return stats if isinstance(stats, Mapping) else {}


def _ratio(done: Any, total: Any) -> str:
    return f"{done if done is not None else '?'}/{total if total is not None else '?'}"


def queue_progress(size: float | None, size_left: float | None) -> str:
    """Return download progress as a percentage with one decimal place."""

    if not size:
        return "0.0%"
    return f"{(1 - (size_left or 0) / size) * 100:.1f}%"


def allowed_quality_names(profile: Payload) -> list[str]:
    """Names of the qualities a profile allows, flattening quality groups."""

    names: list[str] = []
    for item in profile.get("items") or []:
        if not item.get("allowed"):
            continue
        quality = item.get("quality") or {}
        name = quality.get("name") or item.get("name")
        if not name:
            members = [
                (member.get("quality") or {}).get("name")
                for member in item.get("items") or []
            ]
            name = ", ".join(member for member in members if member)
        if name:
            names.append(name)
    return names


def summarize_quality_profile(profile: Payload) -> QualityProfileSummary:
    formats = [
        CustomFormatScore(name=f.get("name"), score=f.get("score", 0))
        for f in profile.get("formatItems") or []
        if f.get("score")
    ]
    return QualityProfileSummary(
        id=profile.get("id"),
        name=profile.get("name"),
        upgrade_allowed=profile.get("upgradeAllowed"),
        cutoff=profile.get("cutoff"),
        allowed_qualities=allowed_quality_names(profile),
        custom_formats=formats,
        min_format_score=profile.get("minFormatScore"),
        cutoff_format_score=profile.get("cutoffFormatScore"),
    )


def summarize_health(checks: Sequence[Payload]) -> HealthResponse:
    issues = [
        HealthIssue(
            source=check.get("source"),
            type=check.get("type"),
            message=check.get("message"),
            wiki_url=check.get("wikiUrl"),
        )
        for check in checks
    ]
    return HealthResponse(
        issue_count=len(issues),
        issues=issues,
        status="healthy" if not issues else "issues detected",
    )


def summarize_root_folder(folder: Payload) -> RootFolderSummary:
    free_space = folder.get("freeSpace")
    return RootFolderSummary(
        id=folder.get("id"),
        path=folder.get("path"),
        accessible=folder.get("accessible"),
        free_space=format_bytes(free_space),
        free_space_bytes=free_space,
        unmapped_folders=len(folder.get("unmappedFolders") or []),
    )


def summarize_download_client(client: Payload) -> DownloadClientSummary:
    return DownloadClientSummary(
        id=client.get("id"),
        name=client.get("name"),
        implementation=client.get("implementationName"),
        protocol=client.get("protocol"),
        enabled=client.get("enable"),
        priority=client.get("priority"),
        remove_completed_downloads=client.get("removeCompletedDownloads"),
        remove_failed_downloads=client.get("removeFailedDownloads"),
        tags=list(client.get("tags") or []),
    )


def summarize_tag(tag: Payload) -> TagSummary:
    return TagSummary(id=tag.get("id"), label=tag.get("label"))


def summarize_quality_definition(definition: Payload) -> dict[str, Any]:
    max_size = definition.get("maxSize")
    return {
        "quality": (definition.get("quality") or {}).get("name"),
        "min_size": f"{definition.get('minSize')} MB/min",
        "max_size": "unlimited" if not max_size else f"{max_size} MB/min",
        "preferred_size": f"{definition.get('preferredSize')} MB/min",
    }


def summarize_media_management(config: Payload) -> dict[str, Any]:
    return {
        "recycle_bin": config.get("recycleBin") or "not set",
        "recycle_bin_cleanup_days": config.get("recycleBinCleanupDays"),
        "download_propers_and_repacks": config.get("downloadPropersAndRepacks"),
        "delete_empty_folders": config.get("deleteEmptyFolders"),
        "copy_using_hardlinks": config.get("copyUsingHardlinks"),
        "import_extra_files": config.get("importExtraFiles"),
        "extra_file_extensions": config.get("extraFileExtensions"),
    }


def summarize_queue(queue: Payload) -> QueueResponse:
    records = queue.get("records") or []
    items = [
        QueueItemSummary(
            title=record.get("title"),
            status=record.get("status"),
            progress=queue_progress(record.get("size"), record.get("sizeleft")),
            time_left=record.get("timeleft"),
            download_client=record.get("downloadClient"),
        )
        for record in records
    ]
    return QueueResponse(
        total_records=queue.get("totalRecords", len(records)), items=items
    )


def summarize_series(series: Payload) -> SeriesSummary:
    stats = _statistics(series)
    return SeriesSummary(
        id=series.get("id"),
        title=series.get("title"),
        year=series.get("year"),
        status=series.get("status"),
        network=series.get("network"),
        seasons=stats.get("seasonCount"),
        episodes=_ratio(stats.get("episodeFileCount"), stats.get("totalEpisodeCount")),
        size_on_disk=format_bytes(stats.get("sizeOnDisk")),
        monitored=series.get("monitored"),
    )


def summarize_series_lookup(result: Payload) -> SeriesLookupResult:
    return SeriesLookupResult(
        title=result.get("title"),
        year=result.get("year"),
        tvdb_id=result.get("tvdbId"),
        overview=truncate(result.get("overview"), OVERVIEW_LIMIT),
    )


def summarize_episode(episode: Payload) -> EpisodeSummary:
    return EpisodeSummary(
        id=episode.get("id"),
        season_number=episode.get("seasonNumber"),
        episode_number=episode.get("episodeNumber"),
        title=episode.get("title"),
        air_date=episode.get("airDate"),
        has_file=episode.get("hasFile"),
        monitored=episode.get("monitored"),
    )


def summarize_movie(movie: Payload) -> MovieSummary:
    return MovieSummary(
        id=movie.get("id"),
        title=movie.get("title"),
        year=movie.get("year"),
        status=movie.get("status"),
        has_file=movie.get("hasFile"),
        size_on_disk=format_bytes(movie.get("sizeOnDisk")),
        monitored=movie.get("monitored"),
        studio=movie.get("studio"),
    )


def summarize_movie_lookup(result: Payload) -> MovieLookupResult:
    return MovieLookupResult(
        title=result.get("title"),
        year=result.get("year"),
        tmdb_id=result.get("tmdbId"),
        imdb_id=result.get("imdbId"),
        overview=truncate(result.get("overview"), OVERVIEW_LIMIT),
    )


def summarize_artist(artist: Payload) -> ArtistSummary:
    stats = _statistics(artist)
    return ArtistSummary(
        id=artist.get("id"),
        artist_name=artist.get("artistName"),
        status=artist.get("status"),
        albums=stats.get("albumCount"),
        tracks=_ratio(stats.get("trackFileCount"), stats.get("totalTrackCount")),
        size_on_disk=format_bytes(stats.get("sizeOnDisk")),
        monitored=artist.get("monitored"),
    )


def summarize_artist_lookup(result: Payload) -> ArtistLookupResult:
    return ArtistLookupResult(
        title=result.get("artistName") or result.get("title"),
        foreign_artist_id=result.get("foreignArtistId"),
        overview=truncate(result.get("overview"), OVERVIEW_LIMIT),
    )


def summarize_album(album: Payload) -> AlbumSummary:
    stats = _statistics(album)
    if stats:
        tracks = _ratio(stats.get("trackFileCount"), stats.get("totalTrackCount"))
    else:
        tracks = "unknown"
    return AlbumSummary(
        id=album.get("id"),
        title=album.get("title"),
        release_date=album.get("releaseDate"),
        album_type=album.get("albumType"),
        monitored=album.get("monitored"),
        tracks=tracks,
        size_on_disk=format_bytes(stats.get("sizeOnDisk")),
        percent_complete=stats.get("percentOfTracks") or 0,
        grabbed=album.get("grabbed"),
    )


def summarize_calendar_album(album: Payload) -> dict[str, Any]:
    return {
        "id": album.get("id"),
        "title": album.get("title"),
        "artist_id": album.get("artistId"),
        "release_date": album.get("releaseDate"),
        "album_type": album.get("albumType"),
        "monitored": album.get("monitored"),
    }


def summarize_author(author: Payload) -> AuthorSummary:
    stats = _statistics(author)
    return AuthorSummary(
        id=author.get("id"),
        author_name=author.get("authorName"),
        status=author.get("status"),
        books=_ratio(stats.get("bookFileCount"), stats.get("totalBookCount")),
        size_on_disk=format_bytes(stats.get("sizeOnDisk")),
        monitored=author.get("monitored"),
    )


def summarize_author_lookup(result: Payload) -> AuthorLookupResult:
    return AuthorLookupResult(
        title=result.get("authorName") or result.get("title"),
        foreign_author_id=result.get("foreignAuthorId"),
        overview=truncate(result.get("overview"), OVERVIEW_LIMIT),
    )


def summarize_book(book: Payload) -> BookSummary:
    stats = _statistics(book)
    return BookSummary(
        id=book.get("id"),
        title=book.get("title"),
        release_date=book.get("releaseDate"),
        page_count=book.get("pageCount"),
        monitored=book.get("monitored"),
        has_file=(stats.get("bookFileCount") or 0) > 0,
        size_on_disk=format_bytes(stats.get("sizeOnDisk")),
        grabbed=book.get("grabbed"),
    )


def summarize_calendar_book(book: Payload) -> dict[str, Any]:
    return {
        "id": book.get("id"),
        "title": book.get("title"),
        "author_id": book.get("authorId"),
        "release_date": book.get("releaseDate"),
        "monitored": book.get("monitored"),
    }


def summarize_indexer(indexer: Payload) -> IndexerSummary:
    return IndexerSummary(
        id=indexer.get("id"),
        name=indexer.get("name"),
        protocol=indexer.get("protocol"),
        enable_rss=indexer.get("enableRss"),
        enable_automatic_search=indexer.get("enableAutomaticSearch"),
        enable_interactive_search=indexer.get("enableInteractiveSearch"),
        priority=indexer.get("priority"),
    )


def summarize_indexer_test(
    result: Payload, names: Mapping[Any, str | None]
) -> IndexerTestResult:
    failures = result.get("validationFailures") or []
    return IndexerTestResult(
        id=result.get("id"),
        name=names.get(result.get("id")) or "Unknown",
        is_valid=bool(result.get("isValid")),
        errors=[f.get("errorMessage") for f in failures if f.get("errorMessage")],
    )


def summarize_indexer_stats(stats: Payload) -> IndexerStatsResponse:
    entries = stats.get("indexers") or []
    indexers = [
        IndexerStatsSummary(
            name=entry.get("indexerName"),
            queries=entry.get("numberOfQueries") or 0,
            grabs=entry.get("numberOfGrabs") or 0,
            failed_queries=entry.get("numberOfFailedQueries") or 0,
            failed_grabs=entry.get("numberOfFailedGrabs") or 0,
            avg_response_time=f"{entry.get('averageResponseTime', 0)}ms",
        )
        for entry in entries
    ]
    totals = IndexerStatsTotals(
        queries=sum(i.queries for i in indexers),
        grabs=sum(i.grabs for i in indexers),
        failed_queries=sum(i.failed_queries for i in indexers),
        failed_grabs=sum(i.failed_grabs for i in indexers),
    )
    return IndexerStatsResponse(count=len(indexers), indexers=indexers, totals=totals)


def summarize_added(item: Payload) -> AddedItemResponse:
    """Describe an item the remote service just added to its library."""

    return AddedItemResponse(
        id=item.get("id"),
        title=item.get("title") or item.get("artistName") or item.get("authorName"),
        path=item.get("path"),
        monitored=item.get("monitored"),
    )
