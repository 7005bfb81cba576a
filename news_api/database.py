import logging

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite only enforces FOREIGN KEY constraints when asked to, per connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """
    Explicit data-access handle owning the async engine and session factory.

    The application creates one instance, opens it from the lifespan
    startup hook and closes it on shutdown.  Request handlers obtain
    sessions through the ``get_db`` dependency, which reads the handle from
    ``app.state.db``.
    """

    def __init__(self, url: str, **engine_kwargs) -> None:
        self.url = url
        self._engine_kwargs = engine_kwargs
        self.engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """Create the engine and connection pool.  Safe to call twice."""
        if self.engine is not None:
            return
        self.engine = create_async_engine(self.url, **self._engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            _enable_sqlite_foreign_keys(self.engine)
        self._sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        # Ping to surface mis-configuration early (non-fatal).
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connected: %s", self.engine.url.render_as_string(hide_password=True))
        except Exception as exc:
            logger.warning("Database ping failed: %s", exc)

    async def disconnect(self) -> None:
        """Dispose of the connection pool.  Called once at application shutdown."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database connection pool disposed")
        self.engine = None
        self._sessionmaker = None

    # ------------------------------------------------------------------
    # Sessions and schema
    # ------------------------------------------------------------------

    def _require_connected(self) -> None:
        if self.engine is None or self._sessionmaker is None:
            raise RuntimeError("Database.connect() has not been called")

    def session(self) -> AsyncSession:
        self._require_connected()
        return self._sessionmaker()

    async def create_all(self) -> None:
        self._require_connected()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        self._require_connected()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)


async def get_db(request: Request):
    database: Database = request.app.state.db
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
