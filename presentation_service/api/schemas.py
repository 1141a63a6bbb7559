"""
Request and response schemas for the presentation API.

Request models only fix the wire shape. Length and presence rules are
enforced by the domain validators so every rule lives in one place.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from presentation_service.domain_core.entities.presentation import Presentation


# ---------- REQUESTS ----------
class CreatePresentationRequest(BaseModel):
    """Request body for creating a presentation."""

    title: Any = Field(None, description="Unique presentation title")
    authors: Any = Field(None, description="Non-empty list of author names")


class UpdateAuthorsRequest(BaseModel):
    """Request body for replacing a presentation's authors."""

    authors: Any = Field(None, description="New author list, replaces the old one")


class SlideRequest(BaseModel):
    """Request body for appending or replacing a slide."""

    topic: Any = Field(None, description="Slide topic")
    body: Any = Field(None, description="Slide body text")


# ---------- RESPONSES ----------
class SlideOut(BaseModel):
    topic: str
    body: str


class PresentationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    authors: List[str]
    created_at: datetime = Field(..., alias="createdAt")
    slides: List[SlideOut] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, presentation: Presentation) -> "PresentationOut":
        return cls(
            title=presentation.title,
            authors=list(presentation.authors),
            created_at=presentation.created_at,
            slides=[
                SlideOut(topic=slide.topic, body=slide.body)
                for slide in presentation.slides
            ],
        )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type or code")
    detail: str = Field(..., description="Human-readable error description")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    storage: Optional[str] = None
    storage_ok: bool = True
