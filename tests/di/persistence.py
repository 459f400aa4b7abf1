"""Mock persistence providers for testing."""

from dishka import Scope, provide

from deliberate.domain.repository import (
    ProConRepository,
    QuestionRepository,
    SolutionRepository,
    VoteRepository,
)
from deliberate.persistence.repository.inmemory import (
    InMemoryProConRepository,
    InMemoryQuestionRepository,
    InMemorySolutionRepository,
    InMemoryVoteRepository,
)
from deliberate.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that state survives across the requests of one test
    client; every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_solution_repository(self) -> SolutionRepository:
        """Provide in-memory solution repository."""
        return InMemorySolutionRepository()

    @provide(scope=Scope.APP)
    def get_procon_repository(self) -> ProConRepository:
        """Provide in-memory pro/con repository."""
        return InMemoryProConRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self, procon_repository: ProConRepository) -> VoteRepository:
        """Provide in-memory vote repository that checks pro/con existence."""
        return InMemoryVoteRepository(procon_repository=procon_repository)
