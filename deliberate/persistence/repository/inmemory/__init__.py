"""In-memory repository implementations for testing."""

from .procon import InMemoryProConRepository
from .question import InMemoryQuestionRepository
from .solution import InMemorySolutionRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryProConRepository",
    "InMemoryQuestionRepository",
    "InMemorySolutionRepository",
    "InMemoryVoteRepository",
]
