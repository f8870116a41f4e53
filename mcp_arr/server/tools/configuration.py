"""Configuration review tools shared by the library-managing *arr services."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, TYPE_CHECKING

from ...arr.client import ArrClient
from ...arr.errors import ArrError
from ...arr.families import LIBRARY_FAMILIES, ServiceFamily
from .. import formatting
from ..models import (
    DownloadClientsResponse,
    HealthResponse,
    QualityProfilesResponse,
    RootFoldersResponse,
    SetupReview,
    TagsResponse,
)
from .common import family_tool

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


logger = logging.getLogger(__name__)


async def build_setup_review(client: ArrClient) -> SetupReview:
    """Fetch every configuration section of *client* concurrently.

    A section whose request fails is reported under ``errors`` instead of
    aborting the whole review.
    """

    requests: dict[str, Awaitable[Any]] = {
        "status": client.get_system_status(),
        "health": client.get_health(),
        "quality_profiles": client.get_quality_profiles(),
        "quality_definitions": client.get_quality_definitions(),
        "download_clients": client.get_download_clients(),
        "naming": client.get_naming_config(),
        "media_management": client.get_media_management(),
        "storage": client.get_root_folders(),
        "tags": client.get_tags(),
        "indexers": client.get_indexers(),
    }
    if client.family.profile.metadata_profiles:
        requests["metadata_profiles"] = client.get_metadata_profiles()

    results = await asyncio.gather(*requests.values(), return_exceptions=True)
    fetched: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for section, result in zip(requests, results):
        if isinstance(result, ArrError):
            logger.warning(
                "Setup review of %s could not load %s: %s",
                client.service,
                section,
                result,
            )
            errors[section] = str(result)
        elif isinstance(result, BaseException):
            raise result
        else:
            fetched[section] = result

    review = SetupReview(service=client.service, errors=errors)
    status = fetched.get("status")
    if status is not None:
        review.version = status.get("version")
        review.app_name = status.get("appName")
        review.platform = {
            "os": status.get("osName"),
            "is_docker": status.get("isDocker"),
        }
    if "health" in fetched:
        review.health = {
            "issue_count": len(fetched["health"]),
            "issues": fetched["health"],
        }
    if "storage" in fetched:
        review.storage = {
            "root_folders": [
                formatting.summarize_root_folder(folder).model_dump(exclude={"id"})
                for folder in fetched["storage"]
            ]
        }
    if "quality_profiles" in fetched:
        review.quality_profiles = [
            formatting.summarize_quality_profile(profile).model_dump(
                exclude={"cutoff_format_score"}
            )
            for profile in fetched["quality_profiles"]
        ]
    if "quality_definitions" in fetched:
        review.quality_definitions = [
            formatting.summarize_quality_definition(definition)
            for definition in fetched["quality_definitions"]
        ]
    if "download_clients" in fetched:
        review.download_clients = [
            {
                "name": c.get("name"),
                "type": c.get("implementationName"),
                "protocol": c.get("protocol"),
                "enabled": c.get("enable"),
                "priority": c.get("priority"),
            }
            for c in fetched["download_clients"]
        ]
    if "indexers" in fetched:
        review.indexers = [
            formatting.summarize_indexer(indexer).model_dump(exclude={"id"})
            for indexer in fetched["indexers"]
        ]
    if "naming" in fetched:
        review.naming = fetched["naming"]
    if "media_management" in fetched:
        review.media_management = formatting.summarize_media_management(
            fetched["media_management"]
        )
    if "tags" in fetched:
        review.tags = [tag.get("label") for tag in fetched["tags"]]
    if "metadata_profiles" in fetched:
        review.metadata_profiles = fetched["metadata_profiles"]
    return review


def register_configuration_tools(server: "ArrServer") -> None:
    """Register configuration tools for every configured library service."""

    for family in LIBRARY_FAMILIES:
        if server.is_available(family):
            _register_family(server, family)


def _register_family(server: "ArrServer", family: ServiceFamily) -> None:
    display = family.display_name

    def _config_tool(suffix: str, *, title: str, description: str):
        return family_tool(
            server,
            family,
            suffix,
            title=title,
            category="configuration",
            description=description,
        )

    @_config_tool(
        "get_quality_profiles",
        title=f"{display} quality profiles",
        description=(
            f"Get detailed quality profiles from {display}. Shows allowed "
            "qualities, upgrade settings, and custom format scores."
        ),
    )
    async def get_quality_profiles() -> QualityProfilesResponse:
        profiles = await server.require_client(family).get_quality_profiles()
        return QualityProfilesResponse(
            count=len(profiles),
            profiles=[formatting.summarize_quality_profile(p) for p in profiles],
        )

    @_config_tool(
        "get_health",
        title=f"{display} health",
        description=(
            f"Get health check warnings and issues from {display}. Shows any "
            "problems detected by the application."
        ),
    )
    async def get_health() -> HealthResponse:
        checks = await server.require_client(family).get_health()
        return formatting.summarize_health(checks)

    @_config_tool(
        "get_root_folders",
        title=f"{display} root folders",
        description=(
            f"Get root folders and storage info from {display}. Shows paths, "
            "free space, and unmapped folders."
        ),
    )
    async def get_root_folders() -> RootFoldersResponse:
        folders = await server.require_client(family).get_root_folders()
        return RootFoldersResponse(
            count=len(folders),
            folders=[formatting.summarize_root_folder(f) for f in folders],
        )

    @_config_tool(
        "get_download_clients",
        title=f"{display} download clients",
        description=(
            f"Get download client configurations from {display}. Shows "
            "configured clients and their settings."
        ),
    )
    async def get_download_clients() -> DownloadClientsResponse:
        clients = await server.require_client(family).get_download_clients()
        return DownloadClientsResponse(
            count=len(clients),
            clients=[formatting.summarize_download_client(c) for c in clients],
        )

    @_config_tool(
        "get_naming",
        title=f"{display} naming",
        description=(
            f"Get file naming configuration from {display}. Shows naming "
            "patterns for files and folders."
        ),
    )
    async def get_naming() -> dict[str, Any]:
        return await server.require_client(family).get_naming_config()

    @_config_tool(
        "get_tags",
        title=f"{display} tags",
        description=(
            f"Get all tags defined in {display}. Tags can be used to organize "
            "and filter content."
        ),
    )
    async def get_tags() -> TagsResponse:
        tags = await server.require_client(family).get_tags()
        return TagsResponse(
            count=len(tags), tags=[formatting.summarize_tag(t) for t in tags]
        )

    @_config_tool(
        "review_setup",
        title=f"{display} setup review",
        description=(
            f"Get comprehensive configuration review for {display}. Returns all "
            "settings for analysis: quality profiles, download clients, naming, "
            "storage, indexers, health warnings, and more. Use this to analyze "
            "the setup and suggest improvements."
        ),
    )
    async def review_setup() -> SetupReview:
        return await build_setup_review(server.require_client(family))


__all__ = ["build_setup_review", "register_configuration_tools"]
