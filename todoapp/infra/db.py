"""
SQLAlchemy database models and configuration.

Architecture Decision: Why SQLAlchemy?
- One ORM mapping serves SQLite, MySQL and SQL Server; the dialect is
  picked from the connection URL instead of duplicating SQL per engine
- Supports async operations for non-blocking database access
- Bound parameters everywhere, so task text never reaches SQL verbatim
"""

import logging

from sqlalchemy import Boolean, Integer, Text, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from todoapp.infra.config import Settings

logger = logging.getLogger(__name__)


# Base class for all models
class Base(DeclarativeBase):
    pass


class TaskModel(Base):
    """SQLAlchemy model for the Tasks table"""
    __tablename__ = "Tasks"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column("Text", Text, nullable=False)
    done: Mapped[bool] = mapped_column("Done", Boolean, default=False, nullable=False)


class StartupError(RuntimeError):
    """The database could not be opened, reached or prepared at startup."""


class DatabaseEngine:
    """
    Manages database connection pool and session lifecycle.

    Constructed once by the entry point and handed to whoever needs it;
    there is no process-wide instance.
    """

    def __init__(self, db_url: str, echo: bool = False):
        self.engine = create_async_engine(db_url, echo=echo, pool_pre_ping=True)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    async def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable"""
        async with self.engine.connect() as conn:
            await conn.execute(select(1))

    async def create_tables(self):
        """Create all tables in the database"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    def get_session(self) -> AsyncSession:
        """Get a new database session"""
        return self.session_factory()

    async def dispose(self) -> None:
        """Close every pooled connection"""
        await self.engine.dispose()


async def open_database(settings: Settings) -> DatabaseEngine:
    """
    Open and verify the configured database.

    Builds the engine, checks connectivity and, in development, creates the
    Tasks table if it is missing. Every failure is fatal for the caller.
    """
    try:
        target = settings.describe_target()
        db = DatabaseEngine(settings.get_db_url(), echo=settings.sql_echo)
    except Exception as e:
        logger.critical("Invalid database configuration: %s", e)
        raise StartupError(f"Failed to connect to database: {e}") from e

    try:
        await db.ping()
    except Exception as e:
        logger.critical("Database connection failed for %s: %s", target, e)
        await db.dispose()
        raise StartupError(f"Database connection failed: {e}") from e

    logger.info("Connected to %s", target)

    if settings.is_development:
        try:
            await db.create_tables()
        except Exception as e:
            logger.critical("Schema sync failed for %s: %s", target, e)
            await db.dispose()
            raise StartupError(f"Failed to create Tasks table: {e}") from e
        logger.info("Tasks table ready (APP_ENV=%s)", settings.app_env)

    return db
