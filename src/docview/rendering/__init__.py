"""Document rendering for docview."""

from docview.rendering.markdown import (
    OriginLinkExtension,
    render_document,
    render_markdown,
)

__all__ = ["OriginLinkExtension", "render_document", "render_markdown"]
