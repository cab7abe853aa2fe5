"""Exception hierarchy for docview."""

from typing import Any


class DocviewError(Exception):
    """Base exception for all docview errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FetchError(DocviewError):
    """A document could not be retrieved from its source URL."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class RenderError(DocviewError):
    """A fetched document could not be rendered."""
