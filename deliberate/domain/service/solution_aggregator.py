"""Solution aggregator: the read side of a question."""

import logfire

from deliberate.domain.error import NotFoundError
from deliberate.domain.model import (
    Principal,
    ProConView,
    QuestionView,
    SolutionView,
)
from deliberate.domain.repository import QuestionRepository
from deliberate.domain.value import Polarity, QuestionId

from .access_gate import AccessGate
from .base import Service
from .votable_store import VotableStore
from .vote_ledger import VoteLedger


class SolutionAggregator(Service):
    """Composes a question with its solutions, pros/cons and vote state."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        votable_store: VotableStore,
        vote_ledger: VoteLedger,
        access_gate: AccessGate,
    ) -> None:
        """Initialize solution aggregator.

        Args:
            question_repository: Question repository
            votable_store: Votable store for solutions and pros/cons
            vote_ledger: Vote ledger for tallies and own votes
            access_gate: Access gate
        """
        self.question_repository = question_repository
        self.votable_store = votable_store
        self.vote_ledger = vote_ledger
        self.access_gate = access_gate

    async def get_question_view(
        self, principal: Principal, question_id: QuestionId
    ) -> QuestionView:
        """Build the full view of a question for a principal.

        Solutions are ordered oldest first, and so are the pros and cons of
        each solution. Every pro/con carries its tally and the principal's own
        vote, both taken from the same ledger read.

        Inactive solutions are only shown to admins.

        Args:
            principal: Requesting principal
            question_id: Question ID

        Returns:
            Question view

        Raises:
            NotFoundError: Question missing, or inactive for a non-admin
            AccessDeniedError: Question active but principal not listed
        """
        with logfire.span(
            "solution_aggregator.get_question_view",
            question_id=str(question_id),
            user_id=str(principal.id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            self.access_gate.check_read(principal, question)

            solutions = await self.votable_store.list_solutions(question.id)
            if not principal.is_admin:
                solutions = [s for s in solutions if s.is_active]

            procons = await self.votable_store.list_procons([s.id for s in solutions])
            states = await self.vote_ledger.get_vote_states(
                principal, [p.id for p in procons]
            )

            pros: dict = {s.id: [] for s in solutions}
            cons: dict = {s.id: [] for s in solutions}
            for procon in procons:
                bucket = pros if procon.polarity == Polarity.PRO else cons
                bucket[procon.solution_id].append(
                    ProConView.build(procon, states[procon.id])
                )

            views = [
                SolutionView.build(solution, pros[solution.id], cons[solution.id])
                for solution in solutions
            ]

            logfire.info(
                "Question view built",
                question_id=str(question_id),
                solutions=len(views),
                procons=len(procons),
            )
            return QuestionView(question=question, solutions=views)
