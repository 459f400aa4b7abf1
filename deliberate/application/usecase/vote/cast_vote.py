"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel, StrictInt

from deliberate.application.usecase.base import BaseUseCase
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import ProConId


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``value`` is a strict int so that booleans are rejected while out-of-range
    integers still reach the ledger and come back as an invalid-value error.
    """

    principal: Principal
    procon_id: UUID
    value: StrictInt


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    procon_id: str
    tally: int
    current_vote: int
    changed: bool


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a pro or con."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize cast vote use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New tally and the principal's current vote

        Raises:
            NotFoundError: Pro/con missing or hidden from the principal
            AccessDeniedError: Principal not on the allow-list
            InvalidVoteValueError: Value is not +1 or -1
            ConflictError: Concurrent write could not be resolved
        """
        result = await self.question_service.vote(
            request.principal, ProConId(request.procon_id), request.value
        )
        return CastVoteResponse(
            procon_id=str(request.procon_id),
            tally=result.tally,
            current_vote=int(result.current_vote),
            changed=result.changed,
        )
