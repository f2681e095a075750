import logging
from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from nextset.core.config import settings
from nextset.core.errors import PersistenceFailure

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(url, echo=settings.SQL_ECHO, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = make_engine(settings.DATABASE_URL)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as db:
        yield db


async def init_db(bind: AsyncEngine | None = None) -> None:
    # Register every model on Base.metadata before creating tables
    import nextset.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def save(db: AsyncSession, action: str) -> None:
    """Commit the session as one unit, rolling back on failure."""
    try:
        await db.flush()
        await db.commit()
    except SQLAlchemyError as exc:
        logger.exception("Failed to %s", action)
        await db.rollback()
        raise PersistenceFailure(f"Failed to {action}") from exc
