"""Download queue and release calendar tools for the library services."""

from __future__ import annotations

from typing import Any, Callable, Mapping, TYPE_CHECKING

from ...arr.families import LIBRARY_FAMILIES, ServiceFamily
from .. import formatting
from ..models import CalendarResponse, QueueResponse
from .common import CalendarDays, calendar_window, family_tool

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


_CALENDAR_DEFAULT_DAYS: dict[ServiceFamily, int] = {
    ServiceFamily.SONARR: 7,
    ServiceFamily.RADARR: 30,
    ServiceFamily.LIDARR: 30,
    ServiceFamily.READARR: 30,
}

_CALENDAR_SUBJECTS: dict[ServiceFamily, str] = {
    ServiceFamily.SONARR: "TV episodes",
    ServiceFamily.RADARR: "movie releases",
    ServiceFamily.LIDARR: "album releases",
    ServiceFamily.READARR: "book releases",
}

_CALENDAR_SHAPERS: dict[ServiceFamily, Callable[[Mapping[str, Any]], dict[str, Any]]] = {
    ServiceFamily.LIDARR: formatting.summarize_calendar_album,
    ServiceFamily.READARR: formatting.summarize_calendar_book,
}


def register_activity_tools(server: "ArrServer") -> None:
    for family in LIBRARY_FAMILIES:
        if server.is_available(family):
            _register_family(server, family)


def _register_family(server: "ArrServer", family: ServiceFamily) -> None:
    name = family.display_name.split(" ")[0]
    default_days = _CALENDAR_DEFAULT_DAYS[family]
    shaper = _CALENDAR_SHAPERS.get(family)

    @family_tool(
        server,
        family,
        "get_queue",
        title=f"{name} download queue",
        category="activity",
        description=f"Get {name} download queue",
    )
    async def get_queue() -> QueueResponse:
        queue = await server.require_client(family).get_queue()
        return formatting.summarize_queue(queue)

    @family_tool(
        server,
        family,
        "get_calendar",
        title=f"{name} calendar",
        category="activity",
        description=f"Get upcoming {_CALENDAR_SUBJECTS[family]} from {name}",
    )
    async def get_calendar(days: CalendarDays = default_days) -> CalendarResponse:
        start, end = calendar_window(days)
        entries = await server.require_client(family).get_calendar(start, end)
        items = [shaper(entry) for entry in entries] if shaper else list(entries)
        return CalendarResponse(start=start, end=end, count=len(items), items=items)


__all__ = ["register_activity_tools"]
