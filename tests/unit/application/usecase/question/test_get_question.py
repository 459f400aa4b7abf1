"""Unit tests for GetQuestionUseCase and ListQuestionsUseCase."""

import pytest

from deliberate.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from deliberate.domain.service import QuestionService
from tests.conftest import make_principal
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_principal("root@x.com", is_admin=True)


async def _seed(service: QuestionService):
    question = await service.create_question(
        ADMIN,
        title="Lab notebook formats",
        description="Paper or electronic?",
        tags=["methods"],
        allowed_emails=["a@x.com", "b@x.com"],
    )
    alice = make_principal("a@x.com")
    solution = await service.create_solution(
        alice, question.id, "Electronic", "Searchable and backed up."
    )
    pro = await service.create_pro(alice, solution.id, "Searchable.")
    con = await service.create_con(alice, solution.id, "Vendor lock-in.")
    await service.vote(alice, pro.id, 1)
    return question, solution, pro, con


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_member_view(self, unit_env):
        """Members get the full tree with their own votes but no allow-list."""
        # Arrange
        service = await unit_env.get(QuestionService)
        use_case = GetQuestionUseCase(question_service=service)
        question, solution, pro, con = await _seed(service)

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=question.id, principal=make_principal("b@x.com"))
        )

        # Assert
        assert response.question.question_id == str(question.id)
        assert response.question.allowed_emails is None
        assert response.question.participant_count == 1
        [solution_item] = response.solutions
        assert solution_item.solution_id == str(solution.id)
        assert [p.procon_id for p in solution_item.pros] == [str(pro.id)]
        assert [c.procon_id for c in solution_item.cons] == [str(con.id)]
        assert solution_item.pros[0].tally == 1
        assert solution_item.pros[0].own_vote is None

    @pytest.mark.asyncio
    async def test_admin_view_includes_allow_list(self, unit_env):
        """Admins see who was invited."""
        service = await unit_env.get(QuestionService)
        use_case = GetQuestionUseCase(question_service=service)
        question, *_ = await _seed(service)

        response = await use_case.execute(
            GetQuestionRequest(question_id=question.id, principal=ADMIN)
        )

        assert response.question.allowed_emails == ["a@x.com", "b@x.com"]


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_visible_questions(self, unit_env):
        """Outsiders see nothing, members see their question."""
        service = await unit_env.get(QuestionService)
        use_case = ListQuestionsUseCase(question_service=service)
        question, *_ = await _seed(service)

        member = await use_case.execute(
            ListQuestionsRequest(principal=make_principal("a@x.com"))
        )
        outsider = await use_case.execute(
            ListQuestionsRequest(principal=make_principal("c@x.com"))
        )

        assert member.total == 1
        assert member.questions[0].question_id == str(question.id)
        assert member.questions[0].allowed_emails is None
        assert member.questions[0].participant_count == 1
        assert outsider.total == 0
        assert outsider.questions == []
