"""Domain value objects."""

from deliberate.domain.value.identifiers import (
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
)
from deliberate.domain.value.types import Email, Polarity, VoteValue

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "SolutionId",
    "ProConId",
    # Types
    "Email",
    "Polarity",
    "VoteValue",
]
