"""Tests for reference resolution."""

import pytest

from docview.core.models.origin import HostingConfig, OriginDescriptor, ReferenceKind
from docview.git import url_resolver
from docview.git.url_resolver import (
    ReferenceResolver,
    format_url,
    resolve_reference,
    resolve_relative_path,
)

BLOB = "https://github.com/org/repo/blob/main"
RAW = "https://raw.githubusercontent.com/org/repo/main"


def _origin(base_path: str) -> OriginDescriptor:
    return OriginDescriptor(owner="org", repo="repo", branch="main", base_path=base_path)


@pytest.mark.unit
class TestResolveRelativePath:
    """Tests for the relative path algebra."""

    @pytest.mark.parametrize(
        ("reference", "base_path", "expected"),
        [
            ("./img.png", "docs/guide", "docs/guide/img.png"),
            ("./img.png", "", "img.png"),
            ("img.png", "docs", "docs/img.png"),
            ("img.png", "", "img.png"),
            ("../x.md", "a/b", "a/x.md"),
            ("../../x.md", "a/b/c", "a/x.md"),
            ("../../x.md", "a", "x.md"),
            ("../x.md", "", "x.md"),
            ("/top/file.md", "a/b", "top/file.md"),
            ("/top/file.md", "", "top/file.md"),
        ],
    )
    def test_paths(self, reference: str, base_path: str, expected: str) -> None:
        assert resolve_relative_path(reference, base_path) == expected

    def test_only_leading_parent_segments_are_consumed(self) -> None:
        assert resolve_relative_path("../a/../b.md", "docs/guide") == "docs/a/../b.md"

    def test_over_ascent_does_not_raise(self) -> None:
        assert resolve_relative_path("../../../../x.md", "a") == "x.md"

    def test_only_one_leading_slash_is_stripped(self) -> None:
        assert resolve_relative_path("//x.md", "docs") == "/x.md"


@pytest.mark.unit
class TestResolveReference:
    """Tests for resolve_reference."""

    @pytest.mark.parametrize("kind", list(ReferenceKind))
    def test_no_origin_leaves_reference_unchanged(self, kind: ReferenceKind) -> None:
        for reference in ("./img.png", "../x.md", "/abs.md", "#top", ""):
            assert resolve_reference(reference, None, kind) == reference

    @pytest.mark.parametrize("kind", list(ReferenceKind))
    def test_absolute_urls_unchanged(self, origin: OriginDescriptor, kind: ReferenceKind) -> None:
        assert resolve_reference("https://example.com/a.png", origin, kind) == "https://example.com/a.png"
        assert resolve_reference("http://example.com/a.md", origin, kind) == "http://example.com/a.md"

    def test_anchor_kept_for_pages(self, origin: OriginDescriptor) -> None:
        assert resolve_reference("#section", origin, ReferenceKind.PAGE) == "#section"

    def test_anchor_resolved_for_raw(self, origin: OriginDescriptor) -> None:
        result = resolve_reference("#section", origin, ReferenceKind.RAW)
        assert result == f"{RAW}/docs/guide/#section"

    def test_relative_image(self, origin: OriginDescriptor) -> None:
        result = resolve_reference("./img.png", origin, ReferenceKind.RAW)
        assert result == f"{RAW}/docs/guide/img.png"

    def test_relative_page(self, origin: OriginDescriptor) -> None:
        result = resolve_reference("install.md", origin, ReferenceKind.PAGE)
        assert result == f"{BLOB}/docs/guide/install.md"

    def test_parent_ascent(self) -> None:
        result = resolve_reference("../../x.md", _origin("a/b/c"), ReferenceKind.PAGE)
        assert result == f"{BLOB}/a/x.md"

    def test_over_ascent(self) -> None:
        result = resolve_reference("../../x.md", _origin("a"), ReferenceKind.PAGE)
        assert result == f"{BLOB}/x.md"

    def test_root_relative_ignores_base_path(self, origin: OriginDescriptor) -> None:
        assert resolve_reference("/top/file.md", origin) == f"{BLOB}/top/file.md"
        assert resolve_reference("/top/file.md", _origin("")) == f"{BLOB}/top/file.md"

    def test_query_string_is_kept(self, origin: OriginDescriptor) -> None:
        result = resolve_reference("./img.png?raw=true", origin, ReferenceKind.RAW)
        assert result == f"{RAW}/docs/guide/img.png?raw=true"

    def test_empty_reference_points_at_directory(self, origin: OriginDescriptor) -> None:
        assert resolve_reference("", origin, ReferenceKind.PAGE) == f"{BLOB}/docs/guide/"

    def test_default_kind_is_page(self, origin: OriginDescriptor) -> None:
        assert resolve_reference("a.md", origin) == f"{BLOB}/docs/guide/a.md"


@pytest.mark.unit
class TestFormatUrl:
    """Tests for output templates."""

    def test_custom_hosts(self) -> None:
        hosting = HostingConfig(canonical_host="git.example.org", raw_host="raw.example.org")
        origin = OriginDescriptor(owner="team", repo="site", branch="dev")
        assert format_url(origin, "a/b.md", ReferenceKind.PAGE, hosting) == (
            "https://git.example.org/team/site/blob/dev/a/b.md"
        )
        assert format_url(origin, "a/b.png", ReferenceKind.RAW, hosting) == (
            "https://raw.example.org/team/site/dev/a/b.png"
        )


@pytest.mark.unit
class TestReferenceResolver:
    """Tests for ReferenceResolver."""

    def test_for_source(self) -> None:
        resolver = ReferenceResolver.for_source(
            "https://raw.githubusercontent.com/org/repo/main/docs/guide/index.md"
        )
        assert resolver.origin == _origin("docs/guide")
        assert resolver.resolve_link("../faq.md") == f"{BLOB}/docs/faq.md"
        assert resolver.resolve_image("../img/logo.png") == f"{RAW}/docs/img/logo.png"

    def test_unrecognized_source(self) -> None:
        resolver = ReferenceResolver.for_source("https://example.com/readme.md")
        assert resolver.origin is None
        assert resolver.resolve_link("./a.md") == "./a.md"
        assert resolver.resolve_image("./a.png") == "./a.png"

    def test_kind_as_string(self, origin: OriginDescriptor) -> None:
        resolver = ReferenceResolver(origin)
        assert resolver.resolve("x.png", "raw") == f"{RAW}/docs/guide/x.png"
        assert resolver.resolve("x.md", "PAGE") == f"{BLOB}/docs/guide/x.md"

    def test_invalid_kind(self, origin: OriginDescriptor) -> None:
        resolver = ReferenceResolver(origin)
        with pytest.raises(ValueError):
            resolver.resolve("x.md", "thumbnail")

    def test_classifies_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        original = url_resolver.classify_origin

        def counting(source_url, hosting=None):
            calls.append(source_url)
            return original(source_url, hosting)

        monkeypatch.setattr(url_resolver, "classify_origin", counting)
        resolver = ReferenceResolver.for_source(
            "https://github.com/org/repo/raw/main/README.md"
        )
        for reference in ("a.md", "./b.md", "../c.md", "/d.md"):
            resolver.resolve_link(reference)
        assert len(calls) == 1
