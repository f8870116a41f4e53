from datetime import date

from mcp_arr.common import format_bytes, truncate
from mcp_arr.server import formatting
from mcp_arr.server.tools.common import calendar_window


def test_format_bytes():
    assert format_bytes(0) == "0 B"
    assert format_bytes(None) == "0 B"
    assert format_bytes(-5) == "0 B"
    assert format_bytes(512) == "512 B"
    assert format_bytes(1024) == "1 KB"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(5 * 1024**3) == "5 GB"
    assert format_bytes(1234567890) == "1.15 GB"
    assert format_bytes(3 * 1024**5) == "3072 TB"


def test_truncate():
    assert truncate(None) is None
    assert truncate("short") == "short"
    text = "x" * 250
    assert truncate(text) == "x" * 200 + "..."
    assert truncate("x" * 200) == "x" * 200


def test_queue_progress():
    assert formatting.queue_progress(1000, 250) == "75.0%"
    assert formatting.queue_progress(1000, 0) == "100.0%"
    assert formatting.queue_progress(0, 0) == "0.0%"
    assert formatting.queue_progress(None, None) == "0.0%"


def test_quality_profile_flattens_groups_and_keeps_scored_formats():
    profile = {
        "id": 4,
        "name": "HD",
        "upgradeAllowed": True,
        "cutoff": 7,
        "items": [
            {"allowed": True, "quality": {"name": "Bluray-1080p"}},
            {"allowed": False, "quality": {"name": "SDTV"}},
            {"allowed": True, "name": "WEB 1080p", "items": []},
            {
                "allowed": True,
                "items": [
                    {"quality": {"name": "WEBDL-720p"}},
                    {"quality": {"name": "WEBRip-720p"}},
                ],
            },
        ],
        "formatItems": [
            {"name": "x265", "score": -100},
            {"name": "Unused", "score": 0},
        ],
        "minFormatScore": 0,
    }
    summary = formatting.summarize_quality_profile(profile)
    assert summary.allowed_qualities == [
        "Bluray-1080p",
        "WEB 1080p",
        "WEBDL-720p, WEBRip-720p",
    ]
    assert [(f.name, f.score) for f in summary.custom_formats] == [("x265", -100)]
    assert summary.upgrade_allowed is True


def test_quality_definition_sizes():
    assert formatting.summarize_quality_definition(
        {"quality": {"name": "HDTV-720p"}, "minSize": 2, "maxSize": 0, "preferredSize": 95}
    ) == {
        "quality": "HDTV-720p",
        "min_size": "2 MB/min",
        "max_size": "unlimited",
        "preferred_size": "95 MB/min",
    }
    assert (
        formatting.summarize_quality_definition({"maxSize": 100})["max_size"]
        == "100 MB/min"
    )


def test_health_summary():
    assert formatting.summarize_health([]).status == "healthy"
    response = formatting.summarize_health(
        [{"source": "IndexerCheck", "type": "warning", "message": "No indexers", "wikiUrl": "u"}]
    )
    assert response.issue_count == 1
    assert response.status == "issues detected"
    assert response.issues[0].wiki_url == "u"


def test_root_folder_summary():
    summary = formatting.summarize_root_folder(
        {
            "id": 1,
            "path": "/tv",
            "accessible": True,
            "freeSpace": 2 * 1024**4,
            "unmappedFolders": [{"name": "a"}, {"name": "b"}],
        }
    )
    assert summary.free_space == "2 TB"
    assert summary.free_space_bytes == 2 * 1024**4
    assert summary.unmapped_folders == 2


def test_series_summary_with_and_without_statistics():
    summary = formatting.summarize_series(
        {
            "id": 1,
            "title": "The Expanse",
            "statistics": {
                "seasonCount": 6,
                "episodeFileCount": 60,
                "totalEpisodeCount": 62,
                "sizeOnDisk": 1024**3,
            },
        }
    )
    assert summary.episodes == "60/62"
    assert summary.size_on_disk == "1 GB"
    assert summary.seasons == 6

    bare = formatting.summarize_series({"id": 2, "title": "Unknown"})
    assert bare.episodes == "?/?"
    assert bare.size_on_disk == "0 B"


def test_lookup_results_truncate_overview():
    result = formatting.summarize_movie_lookup(
        {"title": "Heat", "tmdbId": 949, "imdbId": "tt0113277", "overview": "o" * 300}
    )
    assert result.tmdb_id == 949
    assert result.overview == "o" * 200 + "..."

    artist = formatting.summarize_artist_lookup({"title": "Fallback", "foreignArtistId": "m"})
    assert artist.title == "Fallback"


def test_album_without_statistics():
    album = formatting.summarize_album({"id": 3, "title": "Kid A"})
    assert album.tracks == "unknown"
    assert album.size_on_disk == "0 B"
    assert album.percent_complete == 0


def test_book_has_file():
    assert formatting.summarize_book({"statistics": {"bookFileCount": 1}}).has_file is True
    assert formatting.summarize_book({}).has_file is False


def test_indexer_test_and_stats():
    result = formatting.summarize_indexer_test(
        {"id": 9, "isValid": False, "validationFailures": [{"errorMessage": "bad key"}]},
        {},
    )
    assert result.name == "Unknown"
    assert result.errors == ["bad key"]

    stats = formatting.summarize_indexer_stats(
        {
            "indexers": [
                {"indexerName": "A", "numberOfQueries": 10, "numberOfGrabs": 2, "averageResponseTime": 120},
                {"indexerName": "B", "numberOfQueries": 5, "numberOfFailedQueries": 1},
            ]
        }
    )
    assert stats.count == 2
    assert stats.indexers[0].avg_response_time == "120ms"
    assert stats.indexers[1].avg_response_time == "0ms"
    assert stats.totals.queries == 15
    assert stats.totals.grabs == 2
    assert stats.totals.failed_queries == 1


def test_calendar_window():
    assert calendar_window(7, today=date(2025, 1, 1)) == ("2025-01-01", "2025-01-08")
    assert calendar_window(30, today=date(2025, 12, 15)) == ("2025-12-15", "2026-01-14")
