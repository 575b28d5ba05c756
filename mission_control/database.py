"""Async engine, session factory and declarative base."""
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool, StaticPool

from mission_control.config import settings


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Turn on FK enforcement so ON DELETE CASCADE applies under SQLite."""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def is_in_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.database in (None, "", ":memory:") or parsed.query.get("mode") == "memory"


def create_engine_for(url: str, echo: bool = False) -> AsyncEngine:
    """
    Build the async engine for ``url``.

    An in-memory SQLite database lives on one connection, so it is shared
    (StaticPool). A file-backed SQLite database opens a connection per
    session (NullPool): sessions never share a transaction, and closing one
    session cannot roll back another session's pending writes. Both enforce
    foreign keys. Other backends get a regular connection pool.
    """
    if is_sqlite(url):
        if is_in_memory_sqlite(url):
            async_engine = create_async_engine(
                url,
                echo=echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            async_engine = create_async_engine(url, echo=echo, poolclass=NullPool)
        enable_sqlite_foreign_keys(async_engine)
        return async_engine

    return create_async_engine(url, echo=echo, pool_pre_ping=True, pool_size=10, max_overflow=20)


def create_session_factory(async_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = create_engine_for(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
AsyncSessionLocal = create_session_factory(engine)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Request-scoped session dependency."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create missing tables."""
    # Register models on the metadata before create_all
    import mission_control.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
