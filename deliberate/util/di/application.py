"""Application layer DI providers."""

from dishka import Scope, provide

from deliberate.application.usecase.procon import CreateProConUseCase
from deliberate.application.usecase.question import (
    CreateQuestionUseCase,
    DeactivateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from deliberate.application.usecase.solution import CreateSolutionUseCase
from deliberate.application.usecase.vote import CastVoteUseCase
from deliberate.domain.service import QuestionService
from deliberate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_deactivate_question_use_case(
        self, question_service: QuestionService
    ) -> DeactivateQuestionUseCase:
        """Provide deactivate question use case."""
        return DeactivateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Solution use cases
    @provide(scope=Scope.REQUEST)
    def get_create_solution_use_case(
        self, question_service: QuestionService
    ) -> CreateSolutionUseCase:
        """Provide create solution use case."""
        return CreateSolutionUseCase(question_service=question_service)

    # Pro/con use cases
    @provide(scope=Scope.REQUEST)
    def get_create_procon_use_case(
        self, question_service: QuestionService
    ) -> CreateProConUseCase:
        """Provide create pro/con use case."""
        return CreateProConUseCase(question_service=question_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, question_service: QuestionService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(question_service=question_service)
