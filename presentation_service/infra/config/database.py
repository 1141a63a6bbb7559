"""
Database engine and session management.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from presentation_service.data.models import Base
from presentation_service.infra.config.logging_config import get_logger


class Database:
    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._shared_connection_lock: Optional[asyncio.Lock] = None
        self._log = get_logger("database")

    async def initialize(self, create_tables: bool = True) -> None:
        self._log.info("database.initialize", url=self._redacted_url())
        engine_kwargs = {"echo": self.echo}
        if ":memory:" in self.database_url:
            # A single shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # Transactions on the one connection must not interleave
            self._shared_connection_lock = asyncio.Lock()
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_async_engine(self.database_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        if create_tables:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._log.info("database.tables_ready")

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            self._log.info("database.closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        if self._shared_connection_lock is None:
            async with self._transaction() as session:
                yield session
            return

        async with self._shared_connection_lock:
            async with self._transaction() as session:
                yield session

    @asynccontextmanager
    async def _transaction(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            self._log.error("database.health_check_failed", error=str(e))
            return False

    def _redacted_url(self) -> str:
        # Hide credentials from logs
        if "@" not in self.database_url:
            return self.database_url
        scheme, rest = self.database_url.split("://", 1)
        return f"{scheme}://***@{rest.split('@', 1)[1]}"
