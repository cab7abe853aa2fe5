"""Core domain models and exceptions for docview."""

from docview.core.exceptions import (
    DocviewError,
    FetchError,
    RenderError,
)
from docview.core.models import (
    HostingConfig,
    OriginDescriptor,
    Page,
    PageStatus,
    PageView,
    ReferenceKind,
)

__all__ = [
    # Models
    "HostingConfig",
    "OriginDescriptor",
    "ReferenceKind",
    "Page",
    "PageStatus",
    "PageView",
    # Exceptions
    "DocviewError",
    "FetchError",
    "RenderError",
]
