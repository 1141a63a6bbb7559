"""
SQLAlchemy-backed document store for presentations.
"""

import copy
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from presentation_service.application.ports import DocumentStorePort, PresentationDocument
from presentation_service.data.models.presentation_model import PresentationModel
from presentation_service.domain_core.errors import DuplicateTitleError, StorageError
from presentation_service.infra.config.database import Database
from presentation_service.infra.config.logging_config import get_logger


class SqlAlchemyDocumentStore(DocumentStorePort):
    def __init__(self, database: Database):
        self.database = database
        self._log = get_logger("repo.presentation")

    async def insert_unique(self, document: PresentationDocument) -> PresentationDocument:
        """Insert a presentation; the unique index on title decides duplicates."""
        model = PresentationModel(
            title=document["title"],
            authors=list(document["authors"]),
            slides=copy.deepcopy(document.get("slides") or []),
            created_at=document["created_at"],
        )
        try:
            async with self.database.session() as session:
                session.add(model)
        except IntegrityError:
            self._log.info("presentation.insert.duplicate", title=document["title"])
            raise DuplicateTitleError(document["title"])
        except SQLAlchemyError as e:
            self._log.error("presentation.insert.error", error=str(e))
            raise StorageError("insert", str(e))

        self._log.info("presentation.insert", title=document["title"])
        return self._to_document(model)

    async def find_one(self, title: str) -> Optional[PresentationDocument]:
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(PresentationModel).where(PresentationModel.title == title)
                )
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self._log.error("presentation.get.error", title=title, error=str(e))
            raise StorageError("find_one", str(e))

        if model is None:
            self._log.info("presentation.get.not_found", title=title)
            return None

        self._log.info("presentation.get", title=title)
        return self._to_document(model)

    async def find_all(self) -> List[PresentationDocument]:
        try:
            async with self.database.session() as session:
                result = await session.execute(select(PresentationModel))
                models = result.scalars().all()
        except SQLAlchemyError as e:
            self._log.error("presentation.list.error", error=str(e))
            raise StorageError("find_all", str(e))

        items = [self._to_document(model) for model in models]
        self._log.info("presentation.list", count=len(items))
        return items

    async def replace(self, document: PresentationDocument) -> bool:
        """Overwrite authors and slides of the document with the same title."""
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    update(PresentationModel)
                    .where(PresentationModel.title == document["title"])
                    .values(
                        authors=list(document["authors"]),
                        slides=copy.deepcopy(document["slides"]),
                        updated_at=datetime.now(timezone.utc),
                    )
                )
                matched = result.rowcount > 0
        except SQLAlchemyError as e:
            self._log.error(
                "presentation.replace.error", title=document["title"], error=str(e)
            )
            raise StorageError("replace", str(e))

        self._log.info("presentation.replace", title=document["title"], matched=matched)
        return matched

    async def delete(self, title: str) -> int:
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    delete(PresentationModel).where(PresentationModel.title == title)
                )
                deleted = result.rowcount
        except SQLAlchemyError as e:
            self._log.error("presentation.delete.error", title=title, error=str(e))
            raise StorageError("delete", str(e))

        self._log.info("presentation.delete", title=title, deleted=deleted)
        return deleted

    async def health_check(self) -> bool:
        return await self.database.health_check()

    async def close(self) -> None:
        await self.database.close()

    def _to_document(self, model: PresentationModel) -> PresentationDocument:
        """Convert SQLAlchemy model to a plain document without the row id."""
        return {
            "title": model.title,
            "authors": list(model.authors or []),
            "created_at": model.created_at,
            "slides": copy.deepcopy(model.slides or []),
        }
