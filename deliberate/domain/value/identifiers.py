"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
SolutionId = NewType("SolutionId", UUID)
ProConId = NewType("ProConId", UUID)
