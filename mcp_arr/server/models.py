"""Typed response models returned by the *arr MCP tools."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ResponseModel(BaseModel):
    """Base model for tool responses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ServiceStatus(_ResponseModel):
    """Connection state for one service family."""

    configured: bool
    connected: bool | None = None
    version: str | None = None
    app_name: str | None = None
    error: str | None = None


class ArrStatusResponse(_ResponseModel):
    services: dict[str, ServiceStatus] = Field(default_factory=dict)


class CustomFormatScore(_ResponseModel):
    name: str | None = None
    score: int = 0


class QualityProfileSummary(_ResponseModel):
    id: int | None = None
    name: str | None = None
    upgrade_allowed: bool | None = None
    cutoff: int | None = None
    allowed_qualities: list[str] = Field(default_factory=list)
    custom_formats: list[CustomFormatScore] = Field(default_factory=list)
    min_format_score: int | None = None
    cutoff_format_score: int | None = None


class QualityProfilesResponse(_ResponseModel):
    count: int
    profiles: list[QualityProfileSummary] = Field(default_factory=list)


class HealthIssue(_ResponseModel):
    source: str | None = None
    type: str | None = None
    message: str | None = None
    wiki_url: str | None = None


class HealthResponse(_ResponseModel):
    issue_count: int
    issues: list[HealthIssue] = Field(default_factory=list)
    status: str


class RootFolderSummary(_ResponseModel):
    id: int | None = None
    path: str | None = None
    accessible: bool | None = None
    free_space: str
    free_space_bytes: int | None = None
    unmapped_folders: int = 0


class RootFoldersResponse(_ResponseModel):
    count: int
    folders: list[RootFolderSummary] = Field(default_factory=list)


class DownloadClientSummary(_ResponseModel):
    id: int | None = None
    name: str | None = None
    implementation: str | None = None
    protocol: str | None = None
    enabled: bool | None = None
    priority: int | None = None
    remove_completed_downloads: bool | None = None
    remove_failed_downloads: bool | None = None
    tags: list[int] = Field(default_factory=list)


class DownloadClientsResponse(_ResponseModel):
    count: int
    clients: list[DownloadClientSummary] = Field(default_factory=list)


class TagSummary(_ResponseModel):
    id: int | None = None
    label: str | None = None


class TagsResponse(_ResponseModel):
    count: int
    tags: list[TagSummary] = Field(default_factory=list)


class SetupReview(_ResponseModel):
    """Combined configuration snapshot of one service.

    Sections that could not be fetched are left empty and their error message
    is recorded under ``errors`` keyed by section name.
    """

    service: str
    version: str | None = None
    app_name: str | None = None
    platform: dict[str, Any] | None = None
    health: dict[str, Any] | None = None
    storage: dict[str, Any] | None = None
    quality_profiles: list[dict[str, Any]] | None = None
    quality_definitions: list[dict[str, Any]] | None = None
    download_clients: list[dict[str, Any]] | None = None
    indexers: list[dict[str, Any]] | None = None
    naming: dict[str, Any] | None = None
    media_management: dict[str, Any] | None = None
    tags: list[str] | None = None
    metadata_profiles: list[dict[str, Any]] | None = None
    errors: dict[str, str] = Field(default_factory=dict)


class QueueItemSummary(_ResponseModel):
    title: str | None = None
    status: str | None = None
    progress: str
    time_left: str | None = None
    download_client: str | None = None


class QueueResponse(_ResponseModel):
    total_records: int
    items: list[QueueItemSummary] = Field(default_factory=list)


class CalendarResponse(_ResponseModel):
    start: str
    end: str
    count: int
    items: list[dict[str, Any]] = Field(default_factory=list)


class CommandResponse(_ResponseModel):
    """Acknowledgement of a queued remote command."""

    success: bool = True
    message: str
    command_id: int | None = None


class AddedItemResponse(_ResponseModel):
    success: bool = True
    id: int | None = None
    title: str | None = None
    path: str | None = None
    monitored: bool | None = None


class SeriesSummary(_ResponseModel):
    id: int | None = None
    title: str | None = None
    year: int | None = None
    status: str | None = None
    network: str | None = None
    seasons: int | None = None
    episodes: str
    size_on_disk: str
    monitored: bool | None = None


class SeriesListResponse(_ResponseModel):
    count: int
    series: list[SeriesSummary] = Field(default_factory=list)


class SeriesLookupResult(_ResponseModel):
    title: str | None = None
    year: int | None = None
    tvdb_id: int | None = None
    overview: str | None = None


class SeriesLookupResponse(_ResponseModel):
    count: int
    results: list[SeriesLookupResult] = Field(default_factory=list)


class EpisodeSummary(_ResponseModel):
    id: int | None = None
    season_number: int | None = None
    episode_number: int | None = None
    title: str | None = None
    air_date: str | None = None
    has_file: bool | None = None
    monitored: bool | None = None


class EpisodesResponse(_ResponseModel):
    count: int
    episodes: list[EpisodeSummary] = Field(default_factory=list)


class MovieSummary(_ResponseModel):
    id: int | None = None
    title: str | None = None
    year: int | None = None
    status: str | None = None
    has_file: bool | None = None
    size_on_disk: str
    monitored: bool | None = None
    studio: str | None = None


class MoviesResponse(_ResponseModel):
    count: int
    movies: list[MovieSummary] = Field(default_factory=list)


class MovieLookupResult(_ResponseModel):
    title: str | None = None
    year: int | None = None
    tmdb_id: int | None = None
    imdb_id: str | None = None
    overview: str | None = None


class MovieLookupResponse(_ResponseModel):
    count: int
    results: list[MovieLookupResult] = Field(default_factory=list)


class ArtistSummary(_ResponseModel):
    id: int | None = None
    artist_name: str | None = None
    status: str | None = None
    albums: int | None = None
    tracks: str
    size_on_disk: str
    monitored: bool | None = None


class ArtistsResponse(_ResponseModel):
    count: int
    artists: list[ArtistSummary] = Field(default_factory=list)


class ArtistLookupResult(_ResponseModel):
    title: str | None = None
    foreign_artist_id: str | None = None
    overview: str | None = None


class ArtistLookupResponse(_ResponseModel):
    count: int
    results: list[ArtistLookupResult] = Field(default_factory=list)


class AlbumSummary(_ResponseModel):
    id: int | None = None
    title: str | None = None
    release_date: str | None = None
    album_type: str | None = None
    monitored: bool | None = None
    tracks: str
    size_on_disk: str
    percent_complete: float = 0
    grabbed: bool | None = None


class AlbumsResponse(_ResponseModel):
    count: int
    albums: list[AlbumSummary] = Field(default_factory=list)


class AuthorSummary(_ResponseModel):
    id: int | None = None
    author_name: str | None = None
    status: str | None = None
    books: str
    size_on_disk: str
    monitored: bool | None = None


class AuthorsResponse(_ResponseModel):
    count: int
    authors: list[AuthorSummary] = Field(default_factory=list)


class AuthorLookupResult(_ResponseModel):
    title: str | None = None
    foreign_author_id: str | None = None
    overview: str | None = None


class AuthorLookupResponse(_ResponseModel):
    count: int
    results: list[AuthorLookupResult] = Field(default_factory=list)


class BookSummary(_ResponseModel):
    id: int | None = None
    title: str | None = None
    release_date: str | None = None
    page_count: int | None = None
    monitored: bool | None = None
    has_file: bool = False
    size_on_disk: str
    grabbed: bool | None = None


class BooksResponse(_ResponseModel):
    count: int
    books: list[BookSummary] = Field(default_factory=list)


class IndexerSummary(_ResponseModel):
    id: int | None = None
    name: str | None = None
    protocol: str | None = None
    enable_rss: bool | None = None
    enable_automatic_search: bool | None = None
    enable_interactive_search: bool | None = None
    priority: int | None = None


class IndexersResponse(_ResponseModel):
    count: int
    indexers: list[IndexerSummary] = Field(default_factory=list)


class IndexerTestResult(_ResponseModel):
    id: int | None = None
    name: str
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class IndexerTestResponse(_ResponseModel):
    count: int
    indexers: list[IndexerTestResult] = Field(default_factory=list)
    healthy: int
    failed: int


class IndexerStatsSummary(_ResponseModel):
    name: str | None = None
    queries: int = 0
    grabs: int = 0
    failed_queries: int = 0
    failed_grabs: int = 0
    avg_response_time: str


class IndexerStatsTotals(_ResponseModel):
    queries: int = 0
    grabs: int = 0
    failed_queries: int = 0
    failed_grabs: int = 0


class IndexerStatsResponse(_ResponseModel):
    count: int
    indexers: list[IndexerStatsSummary] = Field(default_factory=list)
    totals: IndexerStatsTotals


class ReleaseSearchResponse(_ResponseModel):
    count: int
    results: list[dict[str, Any]] = Field(default_factory=list)


class FamilySearchResults(_ResponseModel):
    count: int | None = None
    results: list[dict[str, Any]] | None = None
    error: str | None = None


class SearchAllResponse(_ResponseModel):
    term: str
    services: dict[str, FamilySearchResults] = Field(default_factory=dict)


__all__ = [
    "ServiceStatus",
    "ArrStatusResponse",
    "CustomFormatScore",
    "QualityProfileSummary",
    "QualityProfilesResponse",
    "HealthIssue",
    "HealthResponse",
    "RootFolderSummary",
    "RootFoldersResponse",
    "DownloadClientSummary",
    "DownloadClientsResponse",
    "TagSummary",
    "TagsResponse",
    "SetupReview",
    "QueueItemSummary",
    "QueueResponse",
    "CalendarResponse",
    "CommandResponse",
    "AddedItemResponse",
    "SeriesSummary",
    "SeriesListResponse",
    "SeriesLookupResult",
    "SeriesLookupResponse",
    "EpisodeSummary",
    "EpisodesResponse",
    "MovieSummary",
    "MoviesResponse",
    "MovieLookupResult",
    "MovieLookupResponse",
    "ArtistSummary",
    "ArtistsResponse",
    "ArtistLookupResult",
    "ArtistLookupResponse",
    "AlbumSummary",
    "AlbumsResponse",
    "AuthorSummary",
    "AuthorsResponse",
    "AuthorLookupResult",
    "AuthorLookupResponse",
    "BookSummary",
    "BooksResponse",
    "IndexerSummary",
    "IndexersResponse",
    "IndexerTestResult",
    "IndexerTestResponse",
    "IndexerStatsSummary",
    "IndexerStatsTotals",
    "IndexerStatsResponse",
    "ReleaseSearchResponse",
    "FamilySearchResults",
    "SearchAllResponse",
]
