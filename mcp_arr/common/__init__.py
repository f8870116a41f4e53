"""Shared utilities for the core client and server packages."""

from __future__ import annotations

from .text import format_bytes, truncate
from .types import JSONScalar, JSONValue

__all__ = ["JSONScalar", "JSONValue", "format_bytes", "truncate"]
