"""
Presentation CRUD endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from presentation_service.api.dependencies import PresentationStoreDep
from presentation_service.api.errors import unwrap
from presentation_service.api.schemas import (
    CreatePresentationRequest,
    MessageResponse,
    PresentationOut,
    UpdateAuthorsRequest,
)
from presentation_service.infra.config.logging_config import get_logger

router = APIRouter(prefix="/presentations", tags=["presentations"])
log = get_logger("api.presentations")


@router.post(
    "", response_model=PresentationOut, status_code=status.HTTP_201_CREATED
)
async def create_presentation(
    request: CreatePresentationRequest, store: PresentationStoreDep
) -> PresentationOut:
    """Create a new presentation with an empty slide list."""
    log.info("presentation.create.request")
    presentation = unwrap(await store.create(request.title, request.authors))
    return PresentationOut.from_entity(presentation)


@router.get("", response_model=List[PresentationOut])
async def list_presentations(store: PresentationStoreDep) -> List[PresentationOut]:
    presentations = unwrap(await store.list())
    return [PresentationOut.from_entity(p) for p in presentations]


@router.get("/{title}", response_model=PresentationOut)
async def get_presentation(title: str, store: PresentationStoreDep) -> PresentationOut:
    return PresentationOut.from_entity(unwrap(await store.get(title)))


@router.put("/{title}", response_model=PresentationOut)
async def update_presentation_authors(
    title: str, request: UpdateAuthorsRequest, store: PresentationStoreDep
) -> PresentationOut:
    """Replace the author list of a presentation."""
    log.info("presentation.update.request", title=title)
    presentation = unwrap(await store.update_authors(title, request.authors))
    return PresentationOut.from_entity(presentation)


@router.delete("/{title}", response_model=MessageResponse)
async def delete_presentation(title: str, store: PresentationStoreDep) -> MessageResponse:
    """Delete a presentation together with all its slides."""
    log.info("presentation.delete.request", title=title)
    unwrap(await store.remove(title))
    return MessageResponse(message="Presentation successfully deleted")
