"""Hosting service integration for docview."""

from docview.git.origin import classify_origin
from docview.git.url_resolver import ReferenceResolver, resolve_reference

__all__ = ["ReferenceResolver", "classify_origin", "resolve_reference"]
