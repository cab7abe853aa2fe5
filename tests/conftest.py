"""Pytest configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from docview.config.settings import Settings
from docview.core.models.origin import OriginDescriptor
from docview.services.content import ContentService


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def origin() -> OriginDescriptor:
    """Origin of a document stored under docs/guide."""
    return OriginDescriptor(owner="org", repo="repo", branch="main", base_path="docs/guide")


@pytest.fixture
def make_content_service(
    settings: Settings,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], ContentService]:
    """Build a ContentService whose HTTP traffic goes to ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ContentService:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ContentService(settings=settings, client=client)

    return _make
