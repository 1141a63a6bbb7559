"""
Presentation and slide domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class Slide:
    topic: str
    body: str

    def to_document(self) -> Dict[str, str]:
        return {"topic": self.topic, "body": self.body}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Slide":
        return cls(topic=document["topic"], body=document["body"])


@dataclass
class Presentation:
    title: str
    authors: List[str]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    slides: List[Slide] = field(default_factory=list)

    def append_slide(self, slide: Slide) -> None:
        """Business rule: new slides always go to the end of the deck."""
        self.slides.append(slide)

    def replace_slide(self, index: int, slide: Slide) -> None:
        self.slides[index] = slide

    def remove_slide(self, index: int) -> Slide:
        """Remove the slide at index; later slides shift down by one."""
        return self.slides.pop(index)

    def replace_authors(self, authors: List[str]) -> None:
        self.authors = list(authors)

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "authors": list(self.authors),
            "created_at": self.created_at,
            "slides": [slide.to_document() for slide in self.slides],
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Presentation":
        return cls(
            title=document["title"],
            authors=list(document.get("authors") or []),
            created_at=document["created_at"],
            slides=[Slide.from_document(s) for s in document.get("slides") or []],
        )
