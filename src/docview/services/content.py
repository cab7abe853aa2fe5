"""Content service: loads pages and renders them for display."""

from urllib.parse import quote

import httpx
import structlog

from docview.config.settings import Settings, get_settings
from docview.core.exceptions import FetchError, RenderError
from docview.core.models.origin import HostingConfig
from docview.core.models.page import Page, PageStatus, PageView
from docview.git.origin import classify_origin
from docview.git.url_resolver import ReferenceResolver
from docview.rendering.markdown import render_markdown

logger = structlog.get_logger(__name__)


class ContentService:
    """Service for loading viewer pages.

    Embedded pages and PDFs are only wrapped in a frame URL. Markdown
    pages are fetched, and their links and images are rewritten against
    the source URL before rendering.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self._settings.fetch_timeout,
            follow_redirects=True,
        )

    @property
    def hosting(self) -> HostingConfig:
        return self._settings.hosting

    def pdf_viewer_url(self, url: str) -> str:
        """Build the external viewer URL for a PDF document."""
        return f"{self._settings.pdf_viewer_url}?url={quote(url, safe='')}&embedded=true"

    async def fetch_text(self, url: str) -> str:
        """Fetch the raw text of a document.

        Raises FetchError on a non-success status or a transport failure.
        """
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(str(e) or type(e).__name__, details={"url": url}) from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch: {response.status_code}",
                status_code=response.status_code,
                details={"url": url},
            )
        return response.text

    def render(self, text: str, source_url: str) -> str:
        """Render document text fetched from ``source_url``."""
        resolver = ReferenceResolver.for_source(source_url, self.hosting)
        return render_markdown(text, resolver)

    async def load(self, page: Page) -> PageView:
        """Load a page and produce its view."""
        if page.embed:
            return PageView(page=page, status=PageStatus.EMBED, frame_url=page.url)

        if page.pdf:
            return PageView(
                page=page,
                status=PageStatus.EMBED,
                frame_url=self.pdf_viewer_url(page.url),
            )

        try:
            text = await self.fetch_text(page.url)
        except FetchError as e:
            logger.warning("Failed to load page", url=page.url, error=e.message)
            return PageView(page=page, status=PageStatus.ERROR, error=e.message)

        hosting = self.hosting
        origin = classify_origin(page.url, hosting)
        try:
            html = render_markdown(text, ReferenceResolver(origin, hosting))
        except RenderError as e:
            logger.error("Failed to render page", url=page.url, error=e.message)
            return PageView(page=page, status=PageStatus.ERROR, error=e.message, origin=origin)

        logger.info(
            "Page loaded",
            url=page.url,
            recognized_origin=origin is not None,
        )
        return PageView(page=page, status=PageStatus.READY, html=html, origin=origin)

    async def aclose(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()
