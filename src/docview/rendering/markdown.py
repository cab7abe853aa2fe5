"""Markdown rendering with origin-aware link and image rewriting."""

from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docview.core.exceptions import RenderError
from docview.core.models.origin import HostingConfig
from docview.git.url_resolver import ReferenceResolver

# GitHub flavoured rendering with single newlines kept as line breaks
MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "sane_lists",
    "nl2br",
    "pymdownx.magiclink",
    "pymdownx.tilde",
    "pymdownx.tasklist",
]


class OriginLinkTreeprocessor(Treeprocessor):
    """Rewrite ``<a href>`` and ``<img src>`` against the document origin.

    Links resolve to the hosting service's file viewer, images to the
    raw-content mirror.
    """

    def __init__(self, md: markdown.Markdown, resolver: ReferenceResolver) -> None:
        super().__init__(md)
        self.resolver = resolver

    def run(self, root: Element) -> None:
        for element in root.iter():
            if element.tag == "a":
                element.set("href", self.resolver.resolve_link(element.get("href") or ""))
                element.set("target", "_blank")
                element.set("rel", "noopener noreferrer")
            elif element.tag == "img":
                element.set("src", self.resolver.resolve_image(element.get("src") or ""))
                element.set("loading", "lazy")


class OriginLinkExtension(Extension):
    """Register :class:`OriginLinkTreeprocessor` on a Markdown instance."""

    def __init__(self, resolver: ReferenceResolver, **kwargs) -> None:
        self.resolver = resolver
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        processor = OriginLinkTreeprocessor(md, self.resolver)
        md.treeprocessors.register(processor, "docview_origin_links", 15)


def render_markdown(text: str, resolver: ReferenceResolver) -> str:
    """Render Markdown to HTML, rewriting references with ``resolver``.

    Raw HTML in the source is escaped and shown as text.
    """
    md = markdown.Markdown(
        extensions=[*MARKDOWN_EXTENSIONS, OriginLinkExtension(resolver)],
        output_format="html",
    )
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")

    try:
        return md.convert(text)
    except Exception as e:
        raise RenderError(
            f"Failed to render document: {e}",
            details={"origin": resolver.origin.model_dump() if resolver.origin else None},
        ) from e


def render_document(
    text: str, source_url: str, hosting: HostingConfig | None = None
) -> str:
    """Render a document fetched from ``source_url``.

    The origin is classified once for the whole document.
    """
    return render_markdown(text, ReferenceResolver.for_source(source_url, hosting))
