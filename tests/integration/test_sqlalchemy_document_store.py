"""Integration tests for the SQLAlchemy document store against SQLite."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from presentation_service.application.presentation_store import PresentationStore
from presentation_service.application.slide_manager import SlideManager
from presentation_service.domain_core.errors import DuplicateTitleError, StorageError
from presentation_service.domain_core.result import Err, ErrorKind, Ok


def make_document(title="Intro to Systems", authors=None, slides=None):
    return {
        "title": title,
        "authors": authors or ["A. Lee"],
        "created_at": datetime.now(timezone.utc),
        "slides": slides or [],
    }


class TestSqlAlchemyDocumentStore:
    @pytest.mark.asyncio
    async def test_insert_and_find_one(self, sql_store):
        await sql_store.insert_unique(make_document())

        document = await sql_store.find_one("Intro to Systems")

        assert document["title"] == "Intro to Systems"
        assert document["authors"] == ["A. Lee"]
        assert document["slides"] == []
        assert "id" not in document

    @pytest.mark.asyncio
    async def test_find_one_missing_returns_none(self, sql_store):
        assert await sql_store.find_one("Nothing Here") is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_and_keeps_original(self, sql_store):
        await sql_store.insert_unique(make_document(authors=["A. Lee"]))

        with pytest.raises(DuplicateTitleError):
            await sql_store.insert_unique(make_document(authors=["B. Kim"]))

        documents = await sql_store.find_all()
        assert len(documents) == 1
        assert documents[0]["authors"] == ["A. Lee"]

    @pytest.mark.asyncio
    async def test_replace_overwrites_whole_document(self, sql_store):
        await sql_store.insert_unique(make_document())
        updated = make_document(
            authors=["C. Park"], slides=[{"topic": "Overview", "body": "Why"}]
        )

        matched = await sql_store.replace(updated)
        document = await sql_store.find_one("Intro to Systems")

        assert matched is True
        assert document["authors"] == ["C. Park"]
        assert document["slides"] == [{"topic": "Overview", "body": "Why"}]

    @pytest.mark.asyncio
    async def test_replace_missing_document_reports_no_match(self, sql_store):
        assert await sql_store.replace(make_document("Nothing Here")) is False

    @pytest.mark.asyncio
    async def test_delete_returns_count(self, sql_store):
        await sql_store.insert_unique(make_document())

        assert await sql_store.delete("Intro to Systems") == 1
        assert await sql_store.delete("Intro to Systems") == 0

    @pytest.mark.asyncio
    async def test_database_failure_becomes_storage_error(self, sql_store, monkeypatch):
        @asynccontextmanager
        async def broken_session():
            raise OperationalError("SELECT", {}, Exception("database is locked"))
            yield  # pragma: no cover

        monkeypatch.setattr(sql_store.database, "session", broken_session)

        with pytest.raises(StorageError, match="database is locked"):
            await sql_store.find_one("Intro to Systems")

    @pytest.mark.asyncio
    async def test_health_check(self, database):
        assert await database.health_check() is True

    @pytest.mark.asyncio
    async def test_store_health_check_reports_database_state(
        self, sql_store, monkeypatch
    ):
        assert await sql_store.health_check() is True

        @asynccontextmanager
        async def broken_session():
            raise OperationalError("SELECT 1", {}, Exception("unable to open database"))
            yield  # pragma: no cover

        monkeypatch.setattr(sql_store.database, "session", broken_session)

        assert await sql_store.health_check() is False

    @pytest.mark.asyncio
    async def test_created_at_comes_back_as_utc(self, sql_store):
        local = datetime(
            2024, 3, 1, 9, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2))
        )
        document = make_document()
        document["created_at"] = local

        await sql_store.insert_unique(document)
        stored = await sql_store.find_one("Intro to Systems")

        assert stored["created_at"] == local
        assert stored["created_at"].utcoffset() == timedelta(0)


class TestServicesOverSql:
    @pytest.mark.asyncio
    async def test_full_lifecycle(self, sql_store, rules):
        store = PresentationStore(sql_store, rules)
        manager = SlideManager(sql_store, rules)

        assert isinstance(await store.create("Intro to Systems", ["A. Lee"]), Ok)
        duplicate = await store.create("Intro to Systems", ["B. Kim"])
        assert duplicate.kind == ErrorKind.DUPLICATE_TITLE

        await manager.append("Intro to Systems", "Overview", "Why this matters")
        await manager.append("Intro to Systems", "Details", "How it works")
        await manager.remove_at("Intro to Systems", 0)

        fetched = await store.get("Intro to Systems")
        assert [s.topic for s in fetched.value.slides] == ["Details"]

        assert isinstance(await store.remove("Intro to Systems"), Ok)
        assert (await store.get("Intro to Systems")).kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_surfaces_storage_failure(self, sql_store, rules, monkeypatch):
        @asynccontextmanager
        async def broken_session():
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))
            yield  # pragma: no cover

        monkeypatch.setattr(sql_store.database, "session", broken_session)
        store = PresentationStore(sql_store, rules)

        result = await store.create("Intro to Systems", ["A. Lee"])

        assert result.kind == ErrorKind.STORAGE_ERROR

    @pytest.mark.asyncio
    async def test_created_at_survives_the_round_trip(self, sql_store, rules):
        store = PresentationStore(sql_store, rules)

        created = await store.create("Intro to Systems", ["A. Lee"])
        fetched = await store.get("Intro to Systems")

        assert fetched.value.created_at == created.value.created_at
        assert fetched.value.created_at.tzinfo is not None
        assert created.value.created_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_concurrent_creates_with_same_title(self, sql_store, rules):
        store = PresentationStore(sql_store, rules)

        results = await asyncio.gather(
            *[store.create("Race Title", [f"Author {i}"]) for i in range(5)]
        )

        assert sum(isinstance(r, Ok) for r in results) == 1
        assert sum(
            isinstance(r, Err) and r.kind == ErrorKind.DUPLICATE_TITLE for r in results
        ) == 4
        assert len(await sql_store.find_all()) == 1

    @pytest.mark.asyncio
    async def test_long_title_is_stored_whole(self, sql_store, rules):
        store = PresentationStore(sql_store, rules)
        title = "T" * 300

        created = await store.create(title, ["A. Lee"])
        fetched = await store.get(title)

        assert isinstance(created, Ok)
        assert fetched.value.title == title
