"""Domain model entities."""

from deliberate.domain.model.principal import Principal
from deliberate.domain.model.procon import ProCon
from deliberate.domain.model.question import Question
from deliberate.domain.model.solution import Solution
from deliberate.domain.model.view import ProConView, QuestionView, SolutionView
from deliberate.domain.model.vote import Vote, VoteResult, VoteState

__all__ = [
    "Principal",
    "Question",
    "Solution",
    "ProCon",
    "Vote",
    "VoteState",
    "VoteResult",
    "QuestionView",
    "SolutionView",
    "ProConView",
]
