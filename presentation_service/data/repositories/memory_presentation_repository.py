"""In-memory document store for presentations."""

import copy
from typing import Dict, List, Optional

from presentation_service.application.ports import DocumentStorePort, PresentationDocument
from presentation_service.domain_core.errors import DuplicateTitleError
from presentation_service.infra.config.logging_config import get_logger


class InMemoryDocumentStore(DocumentStorePort):
    """Dict-backed store keyed by title.

    Each method runs without yielding to the event loop, so the uniqueness
    check and the write in insert_unique cannot interleave with another task.
    """

    def __init__(self):
        self._documents: Dict[str, PresentationDocument] = {}
        self._log = get_logger("repo.presentation.memory")

    async def insert_unique(self, document: PresentationDocument) -> PresentationDocument:
        title = document["title"]
        if title in self._documents:
            self._log.info("presentation.insert.duplicate", title=title)
            raise DuplicateTitleError(title)

        self._documents[title] = copy.deepcopy(document)
        self._log.info("presentation.insert", title=title)
        return copy.deepcopy(document)

    async def find_one(self, title: str) -> Optional[PresentationDocument]:
        document = self._documents.get(title)
        return copy.deepcopy(document) if document is not None else None

    async def find_all(self) -> List[PresentationDocument]:
        return [copy.deepcopy(doc) for doc in self._documents.values()]

    async def replace(self, document: PresentationDocument) -> bool:
        title = document["title"]
        if title not in self._documents:
            return False

        stored = copy.deepcopy(document)
        # created_at is set once at insert
        stored["created_at"] = self._documents[title]["created_at"]
        self._documents[title] = stored
        return True

    async def delete(self, title: str) -> int:
        if title in self._documents:
            del self._documents[title]
            return 1
        return 0
