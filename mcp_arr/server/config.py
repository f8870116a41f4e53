from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..arr.client import ServiceConfig
from ..arr.families import ServiceFamily


class Settings(BaseSettings):
    """Application configuration settings."""

    sonarr_url: str | None = Field(default=None, validation_alias="SONARR_URL")
    sonarr_api_key: str | None = Field(
        default=None, validation_alias="SONARR_API_KEY"
    )
    radarr_url: str | None = Field(default=None, validation_alias="RADARR_URL")
    radarr_api_key: str | None = Field(
        default=None, validation_alias="RADARR_API_KEY"
    )
    lidarr_url: str | None = Field(default=None, validation_alias="LIDARR_URL")
    lidarr_api_key: str | None = Field(
        default=None, validation_alias="LIDARR_API_KEY"
    )
    readarr_url: str | None = Field(default=None, validation_alias="READARR_URL")
    readarr_api_key: str | None = Field(
        default=None, validation_alias="READARR_API_KEY"
    )
    prowlarr_url: str | None = Field(default=None, validation_alias="PROWLARR_URL")
    prowlarr_api_key: str | None = Field(
        default=None, validation_alias="PROWLARR_API_KEY"
    )
    request_timeout: float | None = Field(
        default=None, validation_alias="ARR_REQUEST_TIMEOUT"
    )

    @field_validator(
        "sonarr_url",
        "sonarr_api_key",
        "radarr_url",
        "radarr_api_key",
        "lidarr_url",
        "lidarr_api_key",
        "readarr_url",
        "readarr_api_key",
        "prowlarr_url",
        "prowlarr_api_key",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: object) -> object:
        if value in (None, ""):
            return None
        return value

    def credentials_for(self, family: ServiceFamily) -> tuple[str | None, str | None]:
        """Return the ``(url, api_key)`` pair configured for *family*."""

        return (
            getattr(self, f"{family.value}_url"),
            getattr(self, f"{family.value}_api_key"),
        )

    def configured_families(self) -> list[ServiceFamily]:
        """Families with both a URL and an API key, in declaration order."""

        return [
            family
            for family in ServiceFamily
            if all(self.credentials_for(family))
        ]

    def service_configs(self) -> dict[ServiceFamily, ServiceConfig]:
        configs: dict[ServiceFamily, ServiceConfig] = {}
        for family in self.configured_families():
            url, api_key = self.credentials_for(family)
            configs[family] = ServiceConfig.for_family(family, str(url), str(api_key))
        return configs

    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)
