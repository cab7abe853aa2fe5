"""Page and page view models."""

from enum import Enum

from pydantic import BaseModel

from docview.core.models.origin import OriginDescriptor


class PageStatus(str, Enum):
    """Display state of a loaded page."""

    READY = "ready"
    ERROR = "error"
    EMBED = "embed"


class Page(BaseModel):
    """A navigable entry of the viewer.

    ``embed`` pages are shown as-is in a frame, ``pdf`` pages through
    an external PDF viewer. Anything else is fetched as Markdown.
    """

    title: str
    url: str
    embed: bool = False
    pdf: bool = False


class PageView(BaseModel):
    """Result of loading a page, ready for display."""

    page: Page
    status: PageStatus
    html: str | None = None
    frame_url: str | None = None
    error: str | None = None
    origin: OriginDescriptor | None = None

    @property
    def is_ready(self) -> bool:
        return self.status == PageStatus.READY
