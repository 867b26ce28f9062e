# app/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.engine import make_url

from app.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Owns the async engine (and its connection pool) for the lifetime of
    the process. Created at startup, disposed at shutdown.
    """

    def __init__(self, database_url: str, **engine_kwargs):
        url = make_url(database_url)
        if url.get_backend_name() != "sqlite":
            # Pool sizing only applies to server databases
            engine_kwargs.setdefault("pool_size", 20)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("pool_timeout", 30)
            engine_kwargs.setdefault("pool_recycle", 1800)
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.engine = create_async_engine(database_url, echo=False, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )
        logger.info(f"Database engine configured for: {url.render_as_string(hide_password=True)}")

    async def create_all(self) -> None:
        """Create the tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Release every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async session, rolled back on error and always closed.

        Example:
            ```python
            async with db_manager.session() as db:
                result = await db.execute(select(Client))
            ```
        """
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# Process-wide instance, set by init_db() during application startup
db_manager: Optional[DatabaseSessionManager] = None


async def init_db(database_url: str, **engine_kwargs) -> DatabaseSessionManager:
    """Create the process-wide session manager and make sure tables exist."""
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **engine_kwargs)
    await db_manager.create_all()
    return db_manager


async def close_db() -> None:
    """Dispose the process-wide session manager, if any."""
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Example:
        ```python
        @router.get("/clients")
        async def list_clients(db: AsyncSession = Depends(get_db)):
            ...
        ```
    """
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
