"""Read models returned by the solution aggregator."""

from datetime import datetime
from typing import Optional

from deliberate.domain.model.common import DomainModel
from deliberate.domain.model.procon import ProCon
from deliberate.domain.model.question import Question
from deliberate.domain.model.solution import Solution
from deliberate.domain.model.vote import VoteState
from deliberate.domain.value import (
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
    VoteValue,
)


class ProConView(DomainModel):
    """Pro/con annotated with its tally and the requester's own vote."""

    id: ProConId
    solution_id: SolutionId
    author_id: UserId
    polarity: Polarity
    content: str
    tally: int
    own_vote: Optional[VoteValue]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, procon: ProCon, state: VoteState) -> "ProConView":
        return cls(
            id=procon.id,
            solution_id=procon.solution_id,
            author_id=procon.author_id,
            polarity=procon.polarity,
            content=procon.content,
            tally=state.tally,
            own_vote=state.own_vote,
            created_at=procon.created_at,
            updated_at=procon.updated_at,
        )


class SolutionView(DomainModel):
    """Solution with its ordered pros and cons."""

    id: SolutionId
    question_id: QuestionId
    author_id: UserId
    title: str
    content: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    pros: list[ProConView]
    cons: list[ProConView]

    @classmethod
    def build(
        cls,
        solution: Solution,
        pros: list[ProConView],
        cons: list[ProConView],
    ) -> "SolutionView":
        return cls(
            id=solution.id,
            question_id=solution.question_id,
            author_id=solution.author_id,
            title=solution.title,
            content=solution.content,
            is_active=solution.is_active,
            created_at=solution.created_at,
            updated_at=solution.updated_at,
            pros=pros,
            cons=cons,
        )


class QuestionView(DomainModel):
    """A question and everything a principal may see beneath it."""

    question: Question
    solutions: list[SolutionView]
