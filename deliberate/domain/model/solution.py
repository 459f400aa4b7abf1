"""Solution entity.

A proposed answer to a question, written by an invited expert.
"""

from datetime import datetime

from pydantic import Field

from deliberate.domain.model.common import DomainModel, utcnow
from deliberate.domain.value import QuestionId, SolutionId, UserId


class Solution(DomainModel):
    """Solution entity. Belongs to exactly one question."""

    id: SolutionId
    question_id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
