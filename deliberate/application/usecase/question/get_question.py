"""Get question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import QuestionItem, SolutionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID
    principal: Principal


class GetQuestionResponse(BaseModel):
    """Question with its solutions, pros/cons and vote state."""

    question: QuestionItem
    solutions: list[SolutionItem]


class GetQuestionUseCase(BaseUseCase):
    """Use case for opening a question page."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Full question view for the principal

        Raises:
            NotFoundError: Question missing, or inactive for a non-admin
            AccessDeniedError: Principal not on the allow-list
        """
        with logfire.span("get_question.execute", question_id=str(request.question_id)):
            view = await self.question_service.get_question_view(
                request.principal, QuestionId(request.question_id)
            )
            counts = await self.question_service.participant_counts([view.question])
            return GetQuestionResponse(
                question=QuestionItem.from_domain(
                    view.question,
                    include_emails=request.principal.is_admin,
                    participant_count=counts[view.question.id],
                ),
                solutions=[SolutionItem.from_view(s) for s in view.solutions],
            )
