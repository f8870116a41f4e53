"""Exceptions raised by the *arr API client."""

from __future__ import annotations


class ArrError(Exception):
    """Base class for every failure surfaced by the client."""


class ArrConfigurationError(ArrError):
    """Raised when a service family is missing or lacks an operation."""


class ArrTransportError(ArrError):
    """Raised when the HTTP round-trip itself fails (DNS, connect, timeout)."""

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        self.message = message
        super().__init__(f"{service} request failed: {message}")


class ArrApiError(ArrError):
    """Raised for any response outside the 2xx range."""

    def __init__(
        self, service: str, status_code: int, status_text: str, body: str
    ) -> None:
        self.service = service
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(
            f"{service} API error: {status_code} {status_text} - {body}"
        )


class ArrResponseError(ArrError):
    """Raised when a successful response does not carry valid JSON."""

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        self.message = message
        super().__init__(f"{service} returned an invalid JSON body: {message}")


__all__ = [
    "ArrError",
    "ArrConfigurationError",
    "ArrTransportError",
    "ArrApiError",
    "ArrResponseError",
]
