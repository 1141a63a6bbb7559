"""
Application ports - abstract interfaces for external dependencies.

Documents exchanged through the port are plain dicts with the keys
``title``, ``authors``, ``created_at`` and ``slides``. Storage-internal
identifiers never cross this boundary.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

PresentationDocument = Dict[str, Any]


class DocumentStorePort(ABC):
    """Abstract document store for presentation records."""

    @abstractmethod
    async def insert_unique(self, document: PresentationDocument) -> PresentationDocument:
        """Insert a document, raising DuplicateTitleError if the title is taken."""
        pass

    @abstractmethod
    async def find_one(self, title: str) -> Optional[PresentationDocument]:
        """Find the document whose title matches exactly."""
        pass

    @abstractmethod
    async def find_all(self) -> List[PresentationDocument]:
        """Return every stored document."""
        pass

    @abstractmethod
    async def replace(self, document: PresentationDocument) -> bool:
        """Replace the whole document with the same title. False if none matched."""
        pass

    @abstractmethod
    async def delete(self, title: str) -> int:
        """Delete documents by title and return how many were removed."""
        pass

    async def health_check(self) -> bool:
        """Report whether the store can serve requests."""
        return True

    async def close(self) -> None:
        """Release underlying resources."""
        return None
