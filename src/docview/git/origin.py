"""Origin classification for raw document URLs."""

import re

import structlog

from docview.core.models.origin import HostingConfig, OriginDescriptor

logger = structlog.get_logger(__name__)

DEFAULT_HOSTING = HostingConfig()


def _origin_patterns(hosting: HostingConfig) -> list[re.Pattern[str]]:
    """Build the recognized source URL shapes for a hosting service.

    Both shapes share the same tail: an optional ref prefix that is
    discarded, a single branch segment, and the file path.
    """
    ref_prefix = f"(?:{re.escape(hosting.ref_prefix)})?" if hosting.ref_prefix else ""
    tail = rf"{ref_prefix}([^/]+)/(.*)"
    return [
        # raw.githubusercontent.com/{owner}/{repo}/{branch}/{path}
        re.compile(rf"{re.escape(hosting.raw_host)}/([^/]+)/([^/]+)/{tail}"),
        # github.com/{owner}/{repo}/raw/{branch}/{path}
        re.compile(rf"{re.escape(hosting.canonical_host)}/([^/]+)/([^/]+)/raw/{tail}"),
    ]


def _parent_directory(path: str) -> str:
    """Drop the last segment (the filename) of a slash separated path."""
    return "/".join(path.split("/")[:-1])


def classify_origin(
    source_url: str, hosting: HostingConfig | None = None
) -> OriginDescriptor | None:
    """Recognize a raw file URL and extract its repository location.

    Returns None when the URL matches none of the known shapes, in which
    case references found in the document must be left untouched.

    Examples:
        "https://raw.githubusercontent.com/org/repo/main/docs/a.md"
            -> owner="org", repo="repo", branch="main", base_path="docs"
        "https://github.com/org/repo/raw/refs/heads/dev/README.md"
            -> owner="org", repo="repo", branch="dev", base_path=""
    """
    hosting = hosting or DEFAULT_HOSTING

    for pattern in _origin_patterns(hosting):
        match = pattern.search(source_url)
        if match:
            owner, repo, branch, path = match.groups()
            origin = OriginDescriptor(
                owner=owner,
                repo=repo,
                branch=branch,
                base_path=_parent_directory(path),
            )
            logger.debug(
                "Source URL classified",
                source_url=source_url,
                owner=owner,
                repo=repo,
                branch=branch,
                base_path=origin.base_path,
            )
            return origin

    logger.debug("Source URL not recognized", source_url=source_url)
    return None
