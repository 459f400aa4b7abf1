"""ProCon entity.

Pros and cons are the votable items of the platform: short arguments for or
against a solution, ranked by their vote tally.
"""

from datetime import datetime

from pydantic import Field

from deliberate.domain.model.common import DomainModel, utcnow
from deliberate.domain.value import Polarity, ProConId, SolutionId, UserId


class ProCon(DomainModel):
    """Pro or con attached to a solution."""

    id: ProConId
    solution_id: SolutionId
    author_id: UserId
    polarity: Polarity
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
