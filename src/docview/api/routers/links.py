"""Link classification and resolution endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from docview.api.dependencies import SettingsDep
from docview.core.models.origin import OriginDescriptor, ReferenceKind
from docview.git.origin import classify_origin
from docview.git.url_resolver import ReferenceResolver

router = APIRouter(prefix="/links")


# --- Request/Response models ---

class ClassifyRequest(BaseModel):
    """Request to classify a document source URL."""

    source_url: str = Field(..., min_length=1, max_length=2000)


class ReferenceItem(BaseModel):
    """A reference found in a document, tagged with its kind."""

    reference: str = Field(..., max_length=2000)
    kind: ReferenceKind = ReferenceKind.PAGE


class ResolveRequest(BaseModel):
    """Request to resolve references of one document."""

    source_url: str = Field(..., min_length=1, max_length=2000)
    references: list[ReferenceItem] = Field(default_factory=list, max_length=1000)


class ResolvedReference(ReferenceItem):
    url: str


class ResolveResponse(BaseModel):
    origin: OriginDescriptor | None
    resolved: list[ResolvedReference]


# --- Endpoints ---

@router.post("/classify", response_model=OriginDescriptor | None)
async def classify(request: ClassifyRequest, settings: SettingsDep) -> OriginDescriptor | None:
    """Classify a source URL. Returns null when it is not recognized."""
    return classify_origin(request.source_url, settings.hosting)


@router.post("/resolve", response_model=ResolveResponse)
async def resolve(request: ResolveRequest, settings: SettingsDep) -> ResolveResponse:
    """Resolve every reference of a document against its source URL."""
    resolver = ReferenceResolver.for_source(request.source_url, settings.hosting)
    return ResolveResponse(
        origin=resolver.origin,
        resolved=[
            ResolvedReference(
                reference=item.reference,
                kind=item.kind,
                url=resolver.resolve(item.reference, item.kind),
            )
            for item in request.references
        ],
    )
