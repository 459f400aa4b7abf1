"""Create pro/con use case."""

from uuid import UUID

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import ProConItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import Polarity, SolutionId


class CreateProConRequest(BaseModel):
    """Create pro/con request."""

    principal: Principal
    solution_id: UUID
    polarity: Polarity
    content: str


class CreateProConResponse(ProConItem):
    """Created pro/con (tally 0, no own vote)."""


class CreateProConUseCase(BaseUseCase):
    """Use case for adding a pro or a con to a solution."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create pro/con use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateProConRequest) -> CreateProConResponse:
        """Execute create pro/con flow.

        Args:
            request: Create pro/con request

        Returns:
            Created pro/con

        Raises:
            NotFoundError: Solution missing or hidden from the principal
            AccessDeniedError: Principal not on the allow-list
            ValidationError: Blank or oversized content
        """
        solution_id = SolutionId(request.solution_id)

        if request.polarity == Polarity.PRO:
            view = await self.question_service.create_pro(
                request.principal, solution_id, request.content
            )
        else:  # Polarity.CON
            view = await self.question_service.create_con(
                request.principal, solution_id, request.content
            )

        item = ProConItem.from_view(view)
        return CreateProConResponse(**item.model_dump())
