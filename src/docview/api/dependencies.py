"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from docview.config import Settings
from docview.services.content import ContentService


def get_settings_dep(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_content_service(request: Request) -> ContentService:
    """Get the content service created by the application lifespan."""
    return request.app.state.content_service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
