"""API routers."""

from docview.api.routers import content, health, links

__all__ = ["content", "health", "links"]
