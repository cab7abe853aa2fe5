"""Origin descriptor and hosting models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ReferenceKind(str, Enum):
    """Which output template a reference resolves to.

    PAGE targets the hosting service's file viewer (links),
    RAW targets the raw-content mirror (images).
    """

    PAGE = "page"
    RAW = "raw"


class HostingConfig(BaseModel):
    """Hosts used to recognize source URLs and build resolved URLs."""

    model_config = ConfigDict(frozen=True)

    canonical_host: str = "github.com"
    raw_host: str = "raw.githubusercontent.com"
    ref_prefix: str = "refs/heads/"


class OriginDescriptor(BaseModel):
    """Repository location of a document fetched from the raw-content mirror.

    ``base_path`` is the directory holding the document, relative to the
    repository root, without the filename. An empty string means the root.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    branch: str
    base_path: str = ""
