"""Create solution use case."""

from uuid import UUID

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import SolutionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import QuestionId


class CreateSolutionRequest(BaseModel):
    """Create solution request."""

    principal: Principal
    question_id: UUID
    title: str
    content: str


class CreateSolutionResponse(SolutionItem):
    """Created solution (with empty pros and cons)."""


class CreateSolutionUseCase(BaseUseCase):
    """Use case for proposing a solution to a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create solution use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateSolutionRequest) -> CreateSolutionResponse:
        """Execute create solution flow.

        Args:
            request: Create solution request

        Returns:
            Created solution

        Raises:
            NotFoundError: Question missing, or inactive for a non-admin
            AccessDeniedError: Principal not on the allow-list
            ValidationError: Blank or oversized title/content
        """
        view = await self.question_service.create_solution(
            principal=request.principal,
            question_id=QuestionId(request.question_id),
            title=request.title,
            content=request.content,
        )
        item = SolutionItem.from_view(view)
        return CreateSolutionResponse(**item.model_dump())
