"""Global test configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_FORMAT"] = "console"

from presentation_service.application.presentation_store import PresentationStore
from presentation_service.application.slide_manager import SlideManager
from presentation_service.data.repositories.memory_presentation_repository import (
    InMemoryDocumentStore,
)
from presentation_service.data.repositories.presentation_repository import (
    SqlAlchemyDocumentStore,
)
from presentation_service.domain_core.value_objects.schema_rules import SchemaRules
from presentation_service.infra.config.database import Database
from presentation_service.infra.config.settings import Settings
from presentation_service.main import create_app


@pytest.fixture
def rules() -> SchemaRules:
    return SchemaRules()


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def presentation_store(memory_store, rules) -> PresentationStore:
    return PresentationStore(memory_store, rules)


@pytest.fixture
def slide_manager(memory_store, rules) -> SlideManager:
    return SlideManager(memory_store, rules)


@pytest.fixture
def sample_presentation_data():
    """Sample presentation payload for testing."""
    return {"title": "Intro to Systems", "authors": ["A. Lee", "B. Kim"]}


@pytest.fixture
def sample_slides():
    return [
        {"topic": "Overview", "body": "Why this matters"},
        {"topic": "Processes", "body": "Scheduling and isolation"},
        {"topic": "Memory", "body": "Paging and caches"},
    ]


# ---------- DATABASE FIXTURES ----------


@pytest_asyncio.fixture
async def database():
    """In-memory SQLite database with tables created."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def sql_store(database) -> SqlAlchemyDocumentStore:
    return SqlAlchemyDocumentStore(database)


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ENVIRONMENT="testing",
        STORAGE_BACKEND="memory",
        LOG_FORMAT="console",
    )


@pytest.fixture
def app(test_settings, memory_store):
    """FastAPI application wired to an in-memory document store."""
    return create_app(settings=test_settings, document_store=memory_store)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
