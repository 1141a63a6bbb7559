"""
Presentation Store

Owns presentation records and enforces title uniqueness:
1. Validating input before any storage access
2. Delegating uniqueness to the document store's insert
3. Replacing whole documents on update (last write wins)
"""

from datetime import datetime, timezone
from typing import List

from presentation_service.application.ports import DocumentStorePort
from presentation_service.domain_core.entities.presentation import Presentation
from presentation_service.domain_core.errors import NotFoundError
from presentation_service.domain_core.result import returns_result
from presentation_service.domain_core.validators import PresentationValidators
from presentation_service.domain_core.value_objects.schema_rules import SchemaRules
from presentation_service.infra.config.logging_config import get_logger


class PresentationStore:
    """
    Create, read, update and delete presentations.

    Every public operation returns ``Ok(value)`` or ``Err(kind, detail)``.
    """

    def __init__(self, document_store: DocumentStorePort, rules: SchemaRules):
        self.document_store = document_store
        self.rules = rules
        self._log = get_logger("store.presentation")

    @returns_result
    async def create(self, title: str, authors: List[str]) -> Presentation:
        """
        Create a presentation with no slides.

        Raises DuplicateTitleError through the store's uniqueness constraint;
        any other storage failure surfaces as StorageError.
        """
        PresentationValidators.validate_presentation_input(title, authors, self.rules)

        presentation = Presentation(
            title=title,
            authors=list(authors),
            created_at=datetime.now(timezone.utc),
        )
        document = await self.document_store.insert_unique(presentation.to_document())

        self._log.info(
            "presentation.create", title=title, author_count=len(authors)
        )
        return Presentation.from_document(document)

    @returns_result
    async def get(self, title: str) -> Presentation:
        return await self._load(title)

    @returns_result
    async def list(self) -> List[Presentation]:
        documents = await self.document_store.find_all()
        self._log.info("presentation.list", count=len(documents))
        return [Presentation.from_document(doc) for doc in documents]

    @returns_result
    async def update_authors(self, title: str, authors: List[str]) -> Presentation:
        """Replace the author list entirely. Concurrent updates race; last write wins."""
        PresentationValidators.validate_presentation_input(title, authors, self.rules)

        presentation = await self._load(title)
        presentation.replace_authors(authors)

        if not await self.document_store.replace(presentation.to_document()):
            # Deleted between load and replace
            raise NotFoundError(title)

        self._log.info(
            "presentation.update_authors", title=title, author_count=len(authors)
        )
        return presentation

    @returns_result
    async def remove(self, title: str) -> str:
        deleted = await self.document_store.delete(title)
        if deleted == 0:
            self._log.info("presentation.remove.not_found", title=title)
            raise NotFoundError(title)

        self._log.info("presentation.remove", title=title)
        return title

    async def _load(self, title: str) -> Presentation:
        document = await self.document_store.find_one(title)
        if document is None:
            raise NotFoundError(title)
        return Presentation.from_document(document)
