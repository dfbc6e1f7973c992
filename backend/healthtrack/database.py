"""Async database engine and session management."""
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from healthtrack.config import get_settings

settings = get_settings()


def build_engine(database_url: str):
    """Create an async engine; SQLite files get no connection pool."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.debug, poolclass=NullPool)
    return create_async_engine(
        database_url,
        echo=settings.debug,
        pool_size=10,
        pool_pre_ping=True,
    )


engine = build_engine(settings.database_url)
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for one request."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind=None) -> None:
    """Create all tables that do not exist yet."""
    # Register models on Base.metadata
    from healthtrack import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
