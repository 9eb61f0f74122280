# argus/infrastructure/database/session.py

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Async engine for database_url. In-memory SQLite shares one connection so the schema survives."""
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url:
            return create_async_engine(database_url, echo=echo, poolclass=StaticPool)
        return create_async_engine(database_url, echo=echo)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create tables that do not exist yet. No migrations."""
    # Register ORM models on Base.metadata before create_all.
    from argus.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

