"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from deliberate.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine shared by every request.

    Statements running longer than ``database.statement_timeout_ms`` are
    cancelled by the server, so no request can hold the row lock of a vote
    upsert indefinitely.

    Args:
        settings: Application settings

    Returns:
        Configured async engine
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        connect_args={
            "server_settings": {
                "application_name": "deliberate",
                "statement_timeout": str(db.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Repositories flush explicitly and the DI provider commits once at the end
    of the request, so autoflush is off and objects stay readable after
    commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
