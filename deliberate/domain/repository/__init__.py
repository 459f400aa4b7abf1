"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from deliberate.domain.repository.procon import ProConRepository
from deliberate.domain.repository.question import QuestionRepository
from deliberate.domain.repository.solution import SolutionRepository
from deliberate.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "SolutionRepository",
    "ProConRepository",
    "VoteRepository",
]
