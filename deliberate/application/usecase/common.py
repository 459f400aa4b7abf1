"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from deliberate.domain.model import ProConView, Question, SolutionView
from deliberate.domain.value import Polarity


class ProConItem(BaseModel):
    """Pro/con with its tally and the requester's own vote."""

    procon_id: str
    solution_id: str
    author_id: str
    polarity: Polarity
    content: str
    tally: int
    own_vote: int | None
    created_at: datetime

    @classmethod
    def from_view(cls, view: ProConView) -> "ProConItem":
        return cls(
            procon_id=str(view.id),
            solution_id=str(view.solution_id),
            author_id=str(view.author_id),
            polarity=view.polarity,
            content=view.content,
            tally=view.tally,
            own_vote=int(view.own_vote) if view.own_vote is not None else None,
            created_at=view.created_at,
        )


class SolutionItem(BaseModel):
    """Solution with its pros and cons, oldest first."""

    solution_id: str
    question_id: str
    author_id: str
    title: str
    content: str
    is_active: bool
    created_at: datetime
    pros: list[ProConItem]
    cons: list[ProConItem]

    @classmethod
    def from_view(cls, view: SolutionView) -> "SolutionItem":
        return cls(
            solution_id=str(view.id),
            question_id=str(view.question_id),
            author_id=str(view.author_id),
            title=view.title,
            content=view.content,
            is_active=view.is_active,
            created_at=view.created_at,
            pros=[ProConItem.from_view(p) for p in view.pros],
            cons=[ProConItem.from_view(c) for c in view.cons],
        )


class QuestionItem(BaseModel):
    """Question metadata.

    ``allowed_emails`` is only filled in for admins; other principals never
    see who else was invited. ``participant_count`` is only filled in on
    reads (listing and opening a question).
    """

    question_id: str
    title: str
    description: str
    tags: list[str]
    owner_id: str
    is_active: bool
    allowed_emails: list[str] | None = None
    participant_count: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls,
        question: Question,
        include_emails: bool,
        participant_count: int | None = None,
    ) -> "QuestionItem":
        return cls(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            tags=list(question.tags),
            owner_id=str(question.owner_id),
            is_active=question.is_active,
            allowed_emails=(
                [email.root for email in question.allowed_emails]
                if include_emails
                else None
            ),
            participant_count=participant_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )
