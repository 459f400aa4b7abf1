"""List questions use case."""

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import QuestionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    principal: Principal


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    total: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing the questions a principal may open."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request

        Returns:
            Visible questions, newest first
        """
        questions = await self.question_service.list_questions(request.principal)
        counts = await self.question_service.participant_counts(questions)
        items = [
            QuestionItem.from_domain(
                q,
                include_emails=request.principal.is_admin,
                participant_count=counts[q.id],
            )
            for q in questions
        ]
        return ListQuestionsResponse(questions=items, total=len(items))
