"""
Exceptions for ReviewSlugs.

Extraction itself never raises: `extract_slug()` reports failures on the result.
These exist for registry loading (fatal, a data bug) and for callers that ask
for an exception via `ExtractionResult.raise_for_status()`.
"""

from typing import Any, Dict, Optional


class ReviewSlugsError(Exception):
    """Base exception for all ReviewSlugs errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RegistryError(ReviewSlugsError):
    """A registry entry is malformed (bad pattern, missing formats, ...)."""

    pass


class UnknownPlatformError(ReviewSlugsError):
    """Extraction was requested for a platform key the registry doesn't know."""

    pass


class NoMatchError(ReviewSlugsError):
    """No pattern of the platform matched the input."""

    pass
