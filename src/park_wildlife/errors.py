"""Error types raised by the species data layer.

Lookups that find nothing return ``None``; only failures are exceptions.
"""

from __future__ import annotations


class WildlifeDataError(Exception):
    """Base class for species data errors."""


class TransportError(WildlifeDataError):
    """The observation provider could not be reached or answered non-2xx."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RefreshTimeoutError(WildlifeDataError, TimeoutError):
    """A repository refresh lost its race against the configured timeout."""

    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message)
