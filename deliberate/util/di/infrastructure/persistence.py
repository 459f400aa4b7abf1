"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from deliberate.config import Settings
from deliberate.domain.repository import (
    ProConRepository,
    QuestionRepository,
    SolutionRepository,
    VoteRepository,
)
from deliberate.persistence.database import create_engine, create_session_factory
from deliberate.persistence.repository import (
    PostgresProConRepository,
    PostgresQuestionRepository,
    PostgresSolutionRepository,
    PostgresVoteRepository,
)
from deliberate.util.di.base import ProviderBase
from deliberate.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_solution_repository(self, session: AsyncSession) -> SolutionRepository:
        """Provide Solution repository."""
        return PostgresSolutionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_procon_repository(self, session: AsyncSession) -> ProConRepository:
        """Provide ProCon repository."""
        return PostgresProConRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
