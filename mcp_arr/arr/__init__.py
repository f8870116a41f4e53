"""Client for the *arr REST APIs (Sonarr, Radarr, Lidarr, Readarr, Prowlarr)."""

from __future__ import annotations

from . import lidarr, prowlarr, radarr, readarr, sonarr
from .client import API_KEY_HEADER, ArrClient, ArrRequest, ServiceConfig
from .errors import (
    ArrApiError,
    ArrConfigurationError,
    ArrError,
    ArrResponseError,
    ArrTransportError,
)
from .families import FAMILY_PROFILES, LIBRARY_FAMILIES, FamilyProfile, ServiceFamily

__all__ = [
    "API_KEY_HEADER",
    "ArrClient",
    "ArrRequest",
    "ServiceConfig",
    "ArrError",
    "ArrApiError",
    "ArrConfigurationError",
    "ArrResponseError",
    "ArrTransportError",
    "FAMILY_PROFILES",
    "LIBRARY_FAMILIES",
    "FamilyProfile",
    "ServiceFamily",
    "lidarr",
    "prowlarr",
    "radarr",
    "readarr",
    "sonarr",
]
