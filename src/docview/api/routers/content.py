"""Content loading and rendering endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from docview.api.dependencies import ContentServiceDep
from docview.core.exceptions import RenderError
from docview.core.models.origin import OriginDescriptor
from docview.core.models.page import Page, PageView
from docview.git.origin import classify_origin

router = APIRouter(prefix="/content")


class RenderRequest(BaseModel):
    """Request to render document text already fetched by the caller."""

    source_url: str = Field(..., min_length=1, max_length=2000)
    content: str


class RenderResponse(BaseModel):
    html: str
    origin: OriginDescriptor | None = None


@router.post("/load", response_model=PageView)
async def load(page: Page, service: ContentServiceDep) -> PageView:
    """Load a page. Upstream failures are reported in the view, not as errors."""
    return await service.load(page)


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest, service: ContentServiceDep) -> RenderResponse:
    """Render Markdown text with links resolved against its source URL."""
    try:
        html = service.render(request.content, request.source_url)
    except RenderError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from e

    return RenderResponse(
        html=html,
        origin=classify_origin(request.source_url, service.hosting),
    )
