"""Service families and the fixed per-family API conventions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ServiceFamily(str, Enum):
    """The *arr applications the server can talk to."""

    SONARR = "sonarr"
    RADARR = "radarr"
    LIDARR = "lidarr"
    READARR = "readarr"
    PROWLARR = "prowlarr"

    @property
    def profile(self) -> "FamilyProfile":
        return FAMILY_PROFILES[self]

    @property
    def api_version(self) -> str:
        return self.profile.api_version

    @property
    def display_name(self) -> str:
        return self.profile.display_name


@dataclass(frozen=True)
class FamilyProfile:
    """Static API conventions shared by every instance of a family."""

    api_version: str
    display_name: str
    metadata_profiles: bool = False
    library_management: bool = True


FAMILY_PROFILES: dict[ServiceFamily, FamilyProfile] = {
    ServiceFamily.SONARR: FamilyProfile("v3", "Sonarr (TV)"),
    ServiceFamily.RADARR: FamilyProfile("v3", "Radarr (Movies)"),
    ServiceFamily.LIDARR: FamilyProfile(
        "v1", "Lidarr (Music)", metadata_profiles=True
    ),
    ServiceFamily.READARR: FamilyProfile(
        "v1", "Readarr (Books)", metadata_profiles=True
    ),
    # Prowlarr manages indexers only: no libraries, profiles or naming.
    ServiceFamily.PROWLARR: FamilyProfile(
        "v1", "Prowlarr (Indexers)", library_management=False
    ),
}

LIBRARY_FAMILIES: tuple[ServiceFamily, ...] = tuple(
    family for family in ServiceFamily if family.profile.library_management
)


__all__ = ["ServiceFamily", "FamilyProfile", "FAMILY_PROFILES", "LIBRARY_FAMILIES"]
