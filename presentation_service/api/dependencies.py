"""
FastAPI dependencies for the presentation core services.

The services are built once in the application lifespan and kept on
``app.state``; these helpers hand them to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from presentation_service.application.presentation_store import PresentationStore
from presentation_service.application.slide_manager import SlideManager


def get_presentation_store(request: Request) -> PresentationStore:
    return request.app.state.presentation_store


def get_slide_manager(request: Request) -> SlideManager:
    return request.app.state.slide_manager


# Type aliases for cleaner dependency injection
PresentationStoreDep = Annotated[PresentationStore, Depends(get_presentation_store)]
SlideManagerDep = Annotated[SlideManager, Depends(get_slide_manager)]
