"""Domain models for docview."""

from docview.core.models.origin import HostingConfig, OriginDescriptor, ReferenceKind
from docview.core.models.page import Page, PageStatus, PageView

__all__ = [
    "HostingConfig",
    "OriginDescriptor",
    "ReferenceKind",
    "Page",
    "PageStatus",
    "PageView",
]
