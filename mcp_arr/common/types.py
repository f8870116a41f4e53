"""JSON type aliases for request bodies sent to the *arr APIs."""

from __future__ import annotations

from typing import Mapping, Sequence, TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

__all__ = ["JSONScalar", "JSONValue"]
