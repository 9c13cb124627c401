from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)

from userauth.core.config import settings
from userauth.core.models import Base


# ----------------------------------------------------------------------
# 1. Database Manager Class
# ----------------------------------------------------------------------

class DatabaseManager:
    """
    Manages the SQLAlchemy AsyncEngine and the AsyncSession factory.

    Encapsulates database connection setup and session creation logic for
    the application. The users table is the only persisted state.
    """

    def __init__(self, db_url: str):
        """
        Initializes the DatabaseManager with the database connection URL.

        Args:
            db_url (str): The connection string for the asynchronous database driver.
        """
        self._engine: AsyncEngine = create_async_engine(
            db_url,
            # Checks connection validity on pool checkout.
            pool_pre_ping=True,
            # Set to True only for debugging generated SQL.
            echo=settings.DEBUG,
        )

        self._async_session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            class_=AsyncSession,
            expire_on_commit=False,  # Keeps attributes readable after a commit.
            autoflush=False,
            bind=self._engine,
        )

    @property
    def engine(self) -> AsyncEngine:
        """
        Provides access to the configured SQLAlchemy AsyncEngine.

        Returns:
            AsyncEngine: The configured engine instance.
        """
        return self._engine

    @property
    def async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """
        Provides access to the configured asynchronous session maker.

        Returns:
            async_sessionmaker[AsyncSession]: The session factory.
        """
        return self._async_session_factory

    async def connect(self):
        """
        Creates the tables registered on Base.metadata.

        This method should be called during application startup (FastAPI lifespan).
        Existing tables are left untouched.
        """
        # Import models so their tables get registered on Base.metadata
        from userauth.api.v1 import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def disconnect(self):
        """
        Closes all pooled connections. Called during application shutdown.
        """
        await self._engine.dispose()


# Initialize the DatabaseManager with the URL from settings
db_manager = DatabaseManager(settings.ASYNC_DATABASE_URL)


# ----------------------------------------------------------------------
# 2. FastAPI Dependency
# ----------------------------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The `async with` block guarantees the session is closed after the request
    has finished, regardless of whether an exception occurred.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session bound to the database.
    """
    async_session_factory = db_manager.async_session_factory

    async with async_session_factory() as session:
        yield session
