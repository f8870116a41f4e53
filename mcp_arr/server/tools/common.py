"""Shared parameter types and helpers for the *arr tool modules."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Annotated, Any, Callable, Mapping, TYPE_CHECKING

from pydantic import Field

from ...arr.families import ServiceFamily
from ..models import CommandResponse

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .. import ArrServer


SearchTerm = Annotated[
    str,
    Field(
        description="Search term (title or name) used to look up new items",
        min_length=1,
        examples=["The Expanse"],
    ),
]

CalendarDays = Annotated[
    int,
    Field(
        description="Number of days to look ahead from today",
        ge=1,
        le=365,
        examples=[7],
    ),
]

RootFolderPath = Annotated[
    str,
    Field(
        description="Root folder the new item is stored under (see *_get_root_folders)",
        examples=["/data/media"],
    ),
]

QualityProfileId = Annotated[
    int,
    Field(description="Quality profile id (see *_get_quality_profiles)", ge=1),
]

MetadataProfileId = Annotated[
    int,
    Field(description="Metadata profile id", ge=1),
]

Monitored = Annotated[
    bool,
    Field(description="Monitor the new item for future releases"),
]


def family_tool(
    server: "ArrServer",
    family: ServiceFamily,
    suffix: str,
    *,
    title: str,
    category: str,
    description: str | None = None,
) -> Callable[[Callable[..., Any]], Any]:
    """Return a ``server.tool`` decorator for ``{family}_{suffix}``."""

    return server.tool(
        f"{family.value}_{suffix}",
        title=title,
        description=description,
        meta={"family": family.value, "category": category},
    )


def calendar_window(days: int, *, today: date | None = None) -> tuple[str, str]:
    """Return ISO ``(start, end)`` dates covering *days* from *today* (UTC)."""

    start = today or datetime.now(timezone.utc).date()
    end = start + timedelta(days=days)
    return start.isoformat(), end.isoformat()


def command_response(result: Mapping[str, Any], message: str) -> CommandResponse:
    """Wrap the command object returned by ``POST /command``."""

    return CommandResponse(success=True, message=message, command_id=result.get("id"))


__all__ = [
    "SearchTerm",
    "CalendarDays",
    "RootFolderPath",
    "QualityProfileId",
    "MetadataProfileId",
    "Monitored",
    "family_tool",
    "calendar_window",
    "command_response",
]
