"""
FastAPI application entry point for the Presentation Service API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from presentation_service.api.errors import setup_error_handlers
from presentation_service.api.routers import api_router
from presentation_service.api.schemas import HealthResponse
from presentation_service.application.ports import DocumentStorePort
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
from presentation_service.infra.config.logging_config import get_logger, setup_logging
from presentation_service.infra.config.settings import Settings, get_settings
from presentation_service.infra.middleware.request_context import (
    RequestContextMiddleware,
)


async def build_document_store(settings: Settings) -> DocumentStorePort:
    """Create the document store selected by STORAGE_BACKEND."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "sql":
        database = Database(settings.database_url, echo=settings.debug_sql)
        await database.initialize()
        return SqlAlchemyDocumentStore(database)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def create_app(
    settings: Optional[Settings] = None,
    document_store: Optional[DocumentStorePort] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        setup_logging(settings)
        logger = get_logger("app")

        store = document_store or await build_document_store(settings)
        rules = SchemaRules.from_settings(settings)
        app.state.document_store = store
        app.state.presentation_store = PresentationStore(store, rules)
        app.state.slide_manager = SlideManager(store, rules)
        logger.info(
            "app.startup",
            app_name=settings.app_name,
            environment=settings.environment,
            storage_backend=type(store).__name__,
        )

        yield

        # Shutdown
        if document_store is None:
            await store.close()
        logger.info("app.shutdown", app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Presentation and slide management service",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": f"{settings.app_name} is running", "status": "healthy"}

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        storage_ok = await app.state.document_store.health_check()
        return HealthResponse(
            status="healthy" if storage_ok else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            storage=type(app.state.document_store).__name__,
            storage_ok=storage_ok,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "presentation_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
