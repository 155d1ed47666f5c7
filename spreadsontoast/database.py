"""Database engine, session handling and declarative base."""

from collections.abc import AsyncIterator
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from sqlalchemy import Insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from spreadsontoast.config import settings


class Base(DeclarativeBase):
    """Declarative base for all models."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Database:
    """Owns the async engine and the session factory for one process.

    Built at startup (FastAPI lifespan, Celery task, CLI script) and
    disposed at shutdown; nothing holds a module-level connection.
    """

    def __init__(self, url: str | None = None, **engine_kwargs: Any):
        self.url = url or settings.async_database_url
        if self.url.startswith("postgresql"):
            engine_kwargs.setdefault("pool_pre_ping", True)
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.session_maker()

    async def create_all(self) -> None:
        """Create tables directly from model metadata (tests and local dev)."""
        import spreadsontoast.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a session from the app's Database."""
    db: Database = request.app.state.db
    async with db.session() as session:
        yield session


def upsert(session: AsyncSession, model: type[Base]) -> Insert:
    """Dialect-specific INSERT supporting ON CONFLICT DO UPDATE."""
    if session.bind is not None and session.bind.dialect.name == "sqlite":
        return sqlite.insert(model)
    return postgresql.insert(model)
