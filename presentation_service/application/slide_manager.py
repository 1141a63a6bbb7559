"""
Slide Manager

Mutates the slide list embedded in a presentation. Every operation runs the
same pipeline:
1. Validate slide input (no storage access)
2. Load the parent presentation, failing if it does not exist
3. Check the index against the loaded snapshot, apply, replace the document
"""

from typing import Any

from presentation_service.application.ports import DocumentStorePort
from presentation_service.domain_core.entities.presentation import Presentation, Slide
from presentation_service.domain_core.errors import NotFoundError
from presentation_service.domain_core.result import returns_result
from presentation_service.domain_core.validators import SlideValidators
from presentation_service.domain_core.value_objects.schema_rules import SchemaRules
from presentation_service.infra.config.logging_config import get_logger


class SlideManager:
    def __init__(self, document_store: DocumentStorePort, rules: SchemaRules):
        self.document_store = document_store
        self.rules = rules
        self._log = get_logger("manager.slide")

    @returns_result
    async def append(self, title: str, topic: str, body: str) -> Presentation:
        """Append a slide to the end of the presentation."""
        SlideValidators.validate_slide_input(topic, body, self.rules)

        presentation = await self._load_parent(title)
        presentation.append_slide(Slide(topic=topic, body=body))
        await self._persist(presentation)

        self._log.info(
            "slide.append", title=title, slide_count=len(presentation.slides)
        )
        return presentation

    @returns_result
    async def replace_at(
        self, title: str, index: Any, topic: str, body: str
    ) -> Presentation:
        """Replace the slide at index; nothing else in the presentation changes."""
        SlideValidators.validate_slide_input(topic, body, self.rules)

        presentation = await self._load_parent(title)
        position = SlideValidators.validate_index(index, len(presentation.slides))
        presentation.replace_slide(position, Slide(topic=topic, body=body))
        await self._persist(presentation)

        self._log.info("slide.replace", title=title, index=position)
        return presentation

    @returns_result
    async def remove_at(self, title: str, index: Any) -> Presentation:
        """Remove the slide at index; later slides shift down by one."""
        presentation = await self._load_parent(title)
        position = SlideValidators.validate_index(index, len(presentation.slides))
        presentation.remove_slide(position)
        await self._persist(presentation)

        self._log.info(
            "slide.remove",
            title=title,
            index=position,
            slide_count=len(presentation.slides),
        )
        return presentation

    async def _load_parent(self, title: str) -> Presentation:
        document = await self.document_store.find_one(title)
        if document is None:
            self._log.info("slide.parent_not_found", title=title)
            raise NotFoundError(title)
        return Presentation.from_document(document)

    async def _persist(self, presentation: Presentation) -> None:
        if not await self.document_store.replace(presentation.to_document()):
            raise NotFoundError(presentation.title)
