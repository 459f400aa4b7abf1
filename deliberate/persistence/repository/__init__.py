"""PostgreSQL repository implementations."""

from deliberate.persistence.repository.procon import PostgresProConRepository
from deliberate.persistence.repository.question import PostgresQuestionRepository
from deliberate.persistence.repository.solution import PostgresSolutionRepository
from deliberate.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresSolutionRepository",
    "PostgresProConRepository",
    "PostgresVoteRepository",
]
