from __future__ import annotations

import asyncio
import json
from datetime import date

import httpx
import pytest

from mcp_arr.arr import (
    FAMILY_PROFILES,
    LIBRARY_FAMILIES,
    ArrClient,
    ArrConfigurationError,
    ServiceConfig,
    ServiceFamily,
    lidarr,
    prowlarr,
    radarr,
    readarr,
    sonarr,
)


class Recorder:
    """MockTransport handler returning canned JSON and recording requests."""

    def __init__(self, payload=None, status_code: int = 200) -> None:
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)


def _client(family: ServiceFamily, recorder: Recorder) -> ArrClient:
    config = ServiceConfig.for_family(family, f"http://{family.value}.local", "key")
    return ArrClient(config, transport=httpx.MockTransport(recorder))


def _run(client: ArrClient, coro):
    async def main():
        try:
            return await coro
        finally:
            await client.close()

    return asyncio.run(main())


def test_family_profiles():
    assert ServiceFamily.SONARR.api_version == "v3"
    assert ServiceFamily.RADARR.api_version == "v3"
    assert ServiceFamily.LIDARR.api_version == "v1"
    assert ServiceFamily.READARR.api_version == "v1"
    assert ServiceFamily.PROWLARR.api_version == "v1"
    assert [f for f in ServiceFamily if FAMILY_PROFILES[f].metadata_profiles] == [
        ServiceFamily.LIDARR,
        ServiceFamily.READARR,
    ]
    assert ServiceFamily.PROWLARR not in LIBRARY_FAMILIES
    assert len(LIBRARY_FAMILIES) == 4


@pytest.mark.parametrize(
    "family, path",
    [
        (ServiceFamily.SONARR, "/api/v3/system/status"),
        (ServiceFamily.LIDARR, "/api/v1/system/status"),
        (ServiceFamily.PROWLARR, "/api/v1/system/status"),
    ],
)
def test_shared_inspection_paths_use_family_version(family, path):
    recorder = Recorder({"version": "1"})
    client = _client(family, recorder)
    _run(client, client.get_system_status())
    assert recorder.last.url.path == path


def test_calendar_with_dates_sends_exact_query():
    recorder = Recorder([])
    client = _client(ServiceFamily.SONARR, recorder)
    _run(client, client.get_calendar("2025-01-01", date(2025, 1, 8)))
    assert dict(recorder.last.url.params) == {"start": "2025-01-01", "end": "2025-01-08"}


def test_calendar_without_dates_sends_no_query():
    recorder = Recorder([])
    client = _client(ServiceFamily.RADARR, recorder)
    _run(client, client.get_calendar())
    assert recorder.last.url.query == b""
    assert str(recorder.last.url) == "http://radarr.local/api/v3/calendar"


def test_queue_includes_unknown_items():
    recorder = Recorder({"records": [], "totalRecords": 0})
    client = _client(ServiceFamily.SONARR, recorder)
    _run(client, client.get_queue())
    params = recorder.last.url.params
    assert params["includeUnknownSeriesItems"] == "true"
    assert params["includeUnknownMovieItems"] == "true"


def test_metadata_profiles_unsupported_fails_without_request():
    recorder = Recorder([])
    client = _client(ServiceFamily.SONARR, recorder)
    with pytest.raises(ArrConfigurationError):
        _run(client, client.get_metadata_profiles())
    assert recorder.requests == []


def test_metadata_profiles_for_lidarr():
    recorder = Recorder([{"id": 1, "name": "Standard"}])
    client = _client(ServiceFamily.LIDARR, recorder)
    assert _run(client, client.get_metadata_profiles()) == [{"id": 1, "name": "Standard"}]
    assert recorder.last.url.path == "/api/v1/metadataprofile"


def test_lookup_passes_term():
    recorder = Recorder([])
    client = _client(ServiceFamily.SONARR, recorder)
    _run(client, sonarr.lookup_series(client, "The Expanse"))
    assert recorder.last.url.path == "/api/v3/series/lookup"
    assert recorder.last.url.params["term"] == "The Expanse"


@pytest.mark.parametrize(
    "family, call, expected",
    [
        (
            ServiceFamily.SONARR,
            lambda c: sonarr.search_missing_episodes(c, 12),
            {"name": "SeriesSearch", "seriesId": 12},
        ),
        (
            ServiceFamily.SONARR,
            lambda c: sonarr.search_episodes(c, (3, 4)),
            {"name": "EpisodeSearch", "episodeIds": [3, 4]},
        ),
        (
            ServiceFamily.RADARR,
            lambda c: radarr.search_movie(c, 7),
            {"name": "MoviesSearch", "movieIds": [7]},
        ),
        (
            ServiceFamily.LIDARR,
            lambda c: lidarr.search_missing_albums(c, 2),
            {"name": "ArtistSearch", "artistId": 2},
        ),
        (
            ServiceFamily.LIDARR,
            lambda c: lidarr.search_album(c, 9),
            {"name": "AlbumSearch", "albumIds": [9]},
        ),
        (
            ServiceFamily.READARR,
            lambda c: readarr.search_missing_books(c, 5),
            {"name": "AuthorSearch", "authorId": 5},
        ),
        (
            ServiceFamily.READARR,
            lambda c: readarr.search_books(c, [1]),
            {"name": "BookSearch", "bookIds": [1]},
        ),
    ],
)
def test_trigger_commands_post_exact_body(family, call, expected):
    recorder = Recorder({"id": 4242, "name": expected["name"], "status": "queued"})
    client = _client(family, recorder)
    result = _run(client, call(client))
    assert recorder.last.method == "POST"
    assert recorder.last.url.path.endswith("/command")
    assert recorder.last_body() == expected
    assert result["id"] == 4242


def test_episodes_filter_by_season():
    recorder = Recorder([])
    client = _client(ServiceFamily.SONARR, recorder)
    _run(client, sonarr.get_episodes(client, 3, season_number=0))
    assert dict(recorder.last.url.params) == {"seriesId": "3", "seasonNumber": "0"}


def test_albums_and_books_filter_by_parent():
    recorder = Recorder([])
    client = _client(ServiceFamily.LIDARR, recorder)
    _run(client, lidarr.list_albums(client, 11))
    assert recorder.last.url.path == "/api/v1/album"
    assert recorder.last.url.params["artistId"] == "11"

    recorder = Recorder([])
    client = _client(ServiceFamily.READARR, recorder)
    _run(client, readarr.list_books(client, 8))
    assert recorder.last.url.path == "/api/v1/book"
    assert recorder.last.url.params["authorId"] == "8"


def test_add_series_body():
    recorder = Recorder({"id": 1, "title": "The Expanse"})
    client = _client(ServiceFamily.SONARR, recorder)
    _run(
        client,
        sonarr.add_series(
            client,
            tvdb_id=280619,
            root_folder_path="/tv",
            quality_profile_id=4,
            title="The Expanse",
        ),
    )
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/v3/series"
    assert recorder.last_body() == {
        "title": "The Expanse",
        "tvdbId": 280619,
        "rootFolderPath": "/tv",
        "qualityProfileId": 4,
        "monitored": True,
        "seasonFolder": True,
        "addOptions": {"searchForMissingEpisodes": True},
    }


def test_add_movie_and_artist_request_searches():
    recorder = Recorder({"id": 1})
    client = _client(ServiceFamily.RADARR, recorder)
    _run(
        client,
        radarr.add_movie(
            client, tmdb_id=603, root_folder_path="/movies", quality_profile_id=1
        ),
    )
    assert recorder.last_body()["addOptions"] == {"searchForMovie": True}
    assert recorder.last_body()["tmdbId"] == 603

    recorder = Recorder({"id": 1})
    client = _client(ServiceFamily.LIDARR, recorder)
    _run(
        client,
        lidarr.add_artist(
            client,
            foreign_artist_id="mbid",
            root_folder_path="/music",
            quality_profile_id=1,
            metadata_profile_id=2,
            monitored=False,
        ),
    )
    body = recorder.last_body()
    assert body["metadataProfileId"] == 2
    assert body["monitored"] is False
    assert body["addOptions"] == {"searchForMissingAlbums": True}


def test_prowlarr_search_repeats_categories():
    recorder = Recorder([{"title": "release"}])
    client = _client(ServiceFamily.PROWLARR, recorder)
    result = _run(client, prowlarr.search(client, "ubuntu", [2000, 5000]))
    assert result == [{"title": "release"}]
    assert recorder.last.url.path == "/api/v1/search"
    assert recorder.last.url.params["query"] == "ubuntu"
    assert recorder.last.url.params.get_list("categories") == ["2000", "5000"]


def test_prowlarr_indexer_tests_post():
    recorder = Recorder([])
    client = _client(ServiceFamily.PROWLARR, recorder)
    _run(client, prowlarr.test_all_indexers(client))
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/v1/indexer/testall"

    _run(client, prowlarr.test_indexer(client, 3))
    assert recorder.last.url.path == "/api/v1/indexer/3/test"


@pytest.mark.parametrize(
    "family, call, path",
    [
        (ServiceFamily.SONARR, lambda c: sonarr.get_series(c, 12), "/api/v3/series/12"),
        (ServiceFamily.RADARR, lambda c: radarr.get_movie(c, 603), "/api/v3/movie/603"),
        (ServiceFamily.LIDARR, lambda c: lidarr.get_artist(c, 4), "/api/v1/artist/4"),
        (ServiceFamily.LIDARR, lambda c: lidarr.get_album(c, 9), "/api/v1/album/9"),
        (ServiceFamily.READARR, lambda c: readarr.get_author(c, 5), "/api/v1/author/5"),
        (ServiceFamily.READARR, lambda c: readarr.get_book(c, 77), "/api/v1/book/77"),
    ],
)
def test_getters_fetch_single_item_by_id(family, call, path):
    recorder = Recorder({"id": 1, "title": "item"})
    client = _client(family, recorder)
    assert _run(client, call(client)) == {"id": 1, "title": "item"}
    assert recorder.last.method == "GET"
    assert recorder.last.url.path == path


def test_add_author_body():
    recorder = Recorder({"id": 1})
    client = _client(ServiceFamily.READARR, recorder)
    _run(
        client,
        readarr.add_author(
            client,
            foreign_author_id="goodreads:123",
            root_folder_path="/books",
            quality_profile_id=1,
            metadata_profile_id=3,
        ),
    )
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/v1/author"
    assert recorder.last_body() == {
        "foreignAuthorId": "goodreads:123",
        "rootFolderPath": "/books",
        "qualityProfileId": 1,
        "metadataProfileId": 3,
        "monitored": True,
        "addOptions": {"searchForMissingBooks": True},
    }
