"""URL resolver for references found in fetched documents."""

from docview.core.models.origin import HostingConfig, OriginDescriptor, ReferenceKind
from docview.git.origin import DEFAULT_HOSTING, classify_origin

_ABSOLUTE_PREFIXES = ("http://", "https://")


def resolve_relative_path(reference: str, base_path: str) -> str:
    """Resolve a reference against a directory inside the repository.

    The result is relative to the repository root. Ascending past the root
    is not an error: extra ``..`` segments are simply consumed.

    Examples:
        ("./img.png", "docs") -> "docs/img.png"
        ("../x.md", "a/b") -> "a/x.md"
        ("/top/file.md", "a/b") -> "top/file.md"
    """
    if reference.startswith("./"):
        rest = reference[2:]
        return f"{base_path}/{rest}" if base_path else rest

    if reference.startswith("../"):
        base_parts = base_path.split("/")
        ref_parts = reference.split("/")
        while ref_parts and ref_parts[0] == "..":
            if base_parts:
                base_parts.pop()
            ref_parts.pop(0)
        return "/".join(base_parts + ref_parts)

    if not reference.startswith("/"):
        return f"{base_path}/{reference}" if base_path else reference

    # Rooted at the repository, not the host
    return reference[1:]


def format_url(
    origin: OriginDescriptor,
    resolved_path: str,
    kind: ReferenceKind,
    hosting: HostingConfig | None = None,
) -> str:
    """Build the absolute URL for a repository path."""
    hosting = hosting or DEFAULT_HOSTING
    if kind == ReferenceKind.PAGE:
        return (
            f"https://{hosting.canonical_host}/{origin.owner}/{origin.repo}"
            f"/blob/{origin.branch}/{resolved_path}"
        )
    return (
        f"https://{hosting.raw_host}/{origin.owner}/{origin.repo}"
        f"/{origin.branch}/{resolved_path}"
    )


def resolve_reference(
    reference: str,
    origin: OriginDescriptor | None,
    kind: ReferenceKind = ReferenceKind.PAGE,
    hosting: HostingConfig | None = None,
) -> str:
    """Resolve an href or src found in a document to an absolute URL.

    Absolute URLs are returned unchanged, as is everything when the
    document origin is unknown. In-document anchors are kept for page
    links only; image sources always go through path resolution.
    """
    if origin is None:
        return reference
    if reference.startswith(_ABSOLUTE_PREFIXES):
        return reference
    if kind == ReferenceKind.PAGE and reference.startswith("#"):
        return reference

    resolved_path = resolve_relative_path(reference, origin.base_path)
    return format_url(origin, resolved_path, kind, hosting)


class ReferenceResolver:
    """Resolves references of one document against its origin.

    The origin is classified once, when the resolver is built, and reused
    for every reference of the document.
    """

    def __init__(
        self,
        origin: OriginDescriptor | None,
        hosting: HostingConfig | None = None,
    ) -> None:
        self._origin = origin
        self._hosting = hosting or DEFAULT_HOSTING

    @classmethod
    def for_source(
        cls, source_url: str, hosting: HostingConfig | None = None
    ) -> "ReferenceResolver":
        """Build a resolver for a document fetched from ``source_url``."""
        return cls(classify_origin(source_url, hosting), hosting)

    @property
    def origin(self) -> OriginDescriptor | None:
        return self._origin

    def resolve(self, reference: str, kind: ReferenceKind | str = ReferenceKind.PAGE) -> str:
        """Resolve a single reference with the template for ``kind``."""
        if isinstance(kind, str):
            kind = ReferenceKind(kind.lower())
        return resolve_reference(reference, self._origin, kind, self._hosting)

    def resolve_link(self, href: str) -> str:
        return self.resolve(href, ReferenceKind.PAGE)

    def resolve_image(self, src: str) -> str:
        return self.resolve(src, ReferenceKind.RAW)
