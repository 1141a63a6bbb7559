"""
Slide operations on a presentation's embedded slide list.

Slides are addressed by zero-based position. The index path segment is
taken as a string and parsed by the domain validator, so a malformed
index reports the same error as an out-of-range one.
"""

from fastapi import APIRouter, status

from presentation_service.api.dependencies import SlideManagerDep
from presentation_service.api.errors import unwrap
from presentation_service.api.schemas import PresentationOut, SlideRequest
from presentation_service.infra.config.logging_config import get_logger

router = APIRouter(prefix="/presentations/{title}/slides", tags=["slides"])
log = get_logger("api.slides")


@router.post("", response_model=PresentationOut, status_code=status.HTTP_201_CREATED)
async def append_slide(
    title: str, request: SlideRequest, manager: SlideManagerDep
) -> PresentationOut:
    log.info("slide.append.request", title=title)
    presentation = unwrap(await manager.append(title, request.topic, request.body))
    return PresentationOut.from_entity(presentation)


@router.put("/{index}", response_model=PresentationOut)
async def replace_slide(
    title: str, index: str, request: SlideRequest, manager: SlideManagerDep
) -> PresentationOut:
    log.info("slide.replace.request", title=title, index=index)
    presentation = unwrap(
        await manager.replace_at(title, index, request.topic, request.body)
    )
    return PresentationOut.from_entity(presentation)


@router.delete("/{index}", response_model=PresentationOut)
async def remove_slide(
    title: str, index: str, manager: SlideManagerDep
) -> PresentationOut:
    log.info("slide.remove.request", title=title, index=index)
    presentation = unwrap(await manager.remove_at(title, index))
    return PresentationOut.from_entity(presentation)
