"""Authenticated HTTP client shared by every *arr service family."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

from ..common.types import JSONValue
from .errors import (
    ArrApiError,
    ArrConfigurationError,
    ArrError,
    ArrResponseError,
    ArrTransportError,
)
from .families import ServiceFamily

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"

QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]]


class ServiceConfig(BaseModel):
    """Connection details for one remote *arr instance."""

    model_config = ConfigDict(frozen=True)

    service: ServiceFamily
    base_url: str
    api_key: str
    api_version: str

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if value.endswith("/"):
            return value[:-1]
        return value

    @classmethod
    def for_family(
        cls, family: ServiceFamily, base_url: str, api_key: str
    ) -> "ServiceConfig":
        """Build a configuration using the family's fixed API version."""

        return cls(
            service=family,
            base_url=base_url,
            api_key=api_key,
            api_version=family.api_version,
        )


@dataclass(frozen=True)
class ArrRequest:
    """A single request relative to a service's versioned API root."""

    path: str
    method: str = "GET"
    params: QueryParams | None = None
    body: JSONValue | None = None
    headers: Mapping[str, str] | None = None


def _iso_date(value: str | date | None) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value.isoformat()
    return value


class ArrClient:
    """Execute requests against one configured *arr service.

    Every request carries the configured API key in ``X-Api-Key`` and is
    addressed under ``/api/{version}``. Non-2xx responses raise
    :class:`ArrApiError`; nothing is retried or cached.
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._timeout = timeout
        self._http: httpx.AsyncClient | None = None

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def family(self) -> ServiceFamily:
        return self._config.service

    @property
    def service(self) -> str:
        return self._config.service.value

    def url_for(self, path: str) -> str:
        """Return the absolute URL for *path* (which must start with ``/``)."""

        return f"{self._config.base_url}/api/{self._config.api_version}{path}"

    def headers_for(self, overrides: Mapping[str, str] | None = None) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "Content-Type": "application/json",
                API_KEY_HEADER: self._config.api_key,
            }
        )
        if overrides:
            headers.update(overrides)
        return headers

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            )
        return self._http

    async def close(self) -> None:
        if self._http is not None:
            await self._http.aclose()
        self._http = None

    async def send(self, request: ArrRequest) -> Any:
        """Perform one round-trip and return the decoded JSON body."""

        url = self.url_for(request.path)
        logger.debug("%s %s %s", self.service, request.method, url)
        try:
            response = await self._get_http().request(
                request.method,
                url,
                params=request.params,
                json=request.body,
                headers=self.headers_for(request.headers),
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "%s request %s %s failed: %s", self.service, request.method, url, exc
            )
            raise ArrTransportError(
                self.service, str(exc) or exc.__class__.__name__
            ) from exc

        if not response.is_success:
            try:
                body = response.text
            except (httpx.HTTPError, LookupError, UnicodeDecodeError):
                body = ""
            logger.warning(
                "%s API returned %s for %s %s",
                self.service,
                response.status_code,
                request.method,
                request.path,
            )
            raise ArrApiError(
                self.service, response.status_code, response.reason_phrase, body
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ArrResponseError(self.service, str(exc)) from exc

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: QueryParams | None = None,
        body: JSONValue | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self.send(
            ArrRequest(
                path=path, method=method, params=params, body=body, headers=headers
            )
        )

    # Configuration inspection shared by every family.

    async def get_system_status(self) -> dict[str, Any]:
        return await self.request("/system/status")

    async def get_quality_profiles(self) -> list[dict[str, Any]]:
        return await self.request("/qualityprofile")

    async def get_quality_definitions(self) -> list[dict[str, Any]]:
        return await self.request("/qualitydefinition")

    async def get_health(self) -> list[dict[str, Any]]:
        return await self.request("/health")

    async def get_root_folders(self) -> list[dict[str, Any]]:
        return await self.request("/rootfolder")

    async def get_download_clients(self) -> list[dict[str, Any]]:
        return await self.request("/downloadclient")

    async def get_naming_config(self) -> dict[str, Any]:
        return await self.request("/config/naming")

    async def get_media_management(self) -> dict[str, Any]:
        return await self.request("/config/mediamanagement")

    async def get_tags(self) -> list[dict[str, Any]]:
        return await self.request("/tag")

    async def get_indexers(self) -> list[dict[str, Any]]:
        return await self.request("/indexer")

    async def get_metadata_profiles(self) -> list[dict[str, Any]]:
        if not self.family.profile.metadata_profiles:
            raise ArrConfigurationError(
                f"{self.service} does not support metadata profiles"
            )
        return await self.request("/metadataprofile")

    # Activity shared by every library family.

    async def get_queue(self) -> dict[str, Any]:
        """Return the paginated download queue (``records``/``totalRecords``)."""

        return await self.request(
            "/queue",
            params={
                "includeUnknownSeriesItems": "true",
                "includeUnknownMovieItems": "true",
            },
        )

    async def get_calendar(
        self, start: str | date | None = None, end: str | date | None = None
    ) -> list[dict[str, Any]]:
        """Return calendar entries between the optional ISO ``start``/``end`` dates."""

        params: dict[str, str] = {}
        start_value = _iso_date(start)
        end_value = _iso_date(end)
        if start_value:
            params["start"] = start_value
        if end_value:
            params["end"] = end_value
        return await self.request("/calendar", params=params or None)

    async def run_command(self, name: str, **payload: JSONValue) -> dict[str, Any]:
        """Queue a remote command; the response only carries its tracking id."""

        return await self.request(
            "/command", method="POST", body={"name": name, **payload}
        )

    async def test_connection(self) -> bool:
        try:
            await self.get_system_status()
        except ArrError:
            return False
        return True


__all__ = [
    "API_KEY_HEADER",
    "ArrClient",
    "ArrRequest",
    "QueryParams",
    "ServiceConfig",
]
