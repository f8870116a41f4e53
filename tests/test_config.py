import pytest
from pydantic import ValidationError

from mcp_arr.arr import ServiceFamily
from mcp_arr.server.config import Settings


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("SONARR_URL", "http://localhost:8989/")
    monkeypatch.setenv("SONARR_API_KEY", "abc123")
    settings = Settings()
    assert settings.sonarr_url == "http://localhost:8989/"
    assert settings.configured_families() == [ServiceFamily.SONARR]

    config = settings.service_configs()[ServiceFamily.SONARR]
    assert config.base_url == "http://localhost:8989"
    assert config.api_key == "abc123"
    assert config.api_version == "v3"


def test_settings_require_url_and_key(monkeypatch):
    monkeypatch.setenv("RADARR_URL", "http://localhost:7878")
    monkeypatch.setenv("LIDARR_API_KEY", "k")
    settings = Settings()
    assert settings.configured_families() == []
    assert settings.service_configs() == {}


def test_settings_blank_values_are_unset(monkeypatch):
    monkeypatch.setenv("READARR_URL", "   ")
    monkeypatch.setenv("READARR_API_KEY", "key")
    settings = Settings()
    assert settings.readarr_url is None
    assert settings.credentials_for(ServiceFamily.READARR) == (None, "key")


def test_settings_families_keep_declaration_order():
    settings = Settings(
        PROWLARR_URL="http://p",
        PROWLARR_API_KEY="p",
        SONARR_URL="http://s",
        SONARR_API_KEY="s",
        LIDARR_URL="http://l",
        LIDARR_API_KEY="l",
    )
    assert settings.configured_families() == [
        ServiceFamily.SONARR,
        ServiceFamily.LIDARR,
        ServiceFamily.PROWLARR,
    ]
    assert settings.service_configs()[ServiceFamily.PROWLARR].api_version == "v1"


def test_settings_request_timeout(monkeypatch):
    assert Settings().request_timeout is None
    monkeypatch.setenv("ARR_REQUEST_TIMEOUT", "12.5")
    assert Settings().request_timeout == 12.5
    monkeypatch.setenv("ARR_REQUEST_TIMEOUT", "")
    assert Settings().request_timeout is None


def test_settings_invalid_timeout(monkeypatch):
    monkeypatch.setenv("ARR_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ValidationError):
        Settings()
