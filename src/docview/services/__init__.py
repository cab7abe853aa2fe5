"""Business logic services for docview."""

from docview.services.content import ContentService

__all__ = ["ContentService"]
