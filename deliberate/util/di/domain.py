"""Domain layer DI providers."""

from dishka import Scope, provide

from deliberate.config import AuthSettings, ContentSettings
from deliberate.domain.repository import (
    ProConRepository,
    QuestionRepository,
    SolutionRepository,
    VoteRepository,
)
from deliberate.domain.service import (
    AccessGate,
    JWTService,
    QuestionService,
    SolutionAggregator,
    VotableStore,
    VoteLedger,
)
from deliberate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_gate(self) -> AccessGate:
        """Provide access gate."""
        return AccessGate()

    @provide
    def get_votable_store(
        self,
        solution_repository: SolutionRepository,
        procon_repository: ProConRepository,
    ) -> VotableStore:
        """Provide votable store."""
        return VotableStore(
            solution_repository=solution_repository,
            procon_repository=procon_repository,
        )

    @provide
    def get_vote_ledger(self, vote_repository: VoteRepository) -> VoteLedger:
        """Provide vote ledger."""
        return VoteLedger(vote_repository=vote_repository)

    @provide
    def get_solution_aggregator(
        self,
        question_repository: QuestionRepository,
        votable_store: VotableStore,
        vote_ledger: VoteLedger,
        access_gate: AccessGate,
    ) -> SolutionAggregator:
        """Provide solution aggregator."""
        return SolutionAggregator(
            question_repository=question_repository,
            votable_store=votable_store,
            vote_ledger=vote_ledger,
            access_gate=access_gate,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        votable_store: VotableStore,
        vote_ledger: VoteLedger,
        solution_aggregator: SolutionAggregator,
        access_gate: AccessGate,
        content_settings: ContentSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            votable_store=votable_store,
            vote_ledger=vote_ledger,
            solution_aggregator=solution_aggregator,
            access_gate=access_gate,
            content_settings=content_settings,
        )
