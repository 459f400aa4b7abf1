"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from deliberate.application.usecase.vote.cast_vote import (
    CastVoteRequest,
    CastVoteUseCase,
)
from deliberate.domain.error import (
    AccessDeniedError,
    InvalidVoteValueError,
    NotFoundError,
)
from deliberate.domain.service import QuestionService
from tests.conftest import make_principal
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ADMIN = make_principal("root@x.com", is_admin=True)


async def _make_pro(service: QuestionService, allowed: list[str]):
    question = await service.create_question(
        ADMIN,
        title="Open data mandates",
        description="Should funders require open data?",
        tags=[],
        allowed_emails=allowed,
    )
    solution = await service.create_solution(
        ADMIN, question.id, "Mandate deposit", "Require deposit at publication."
    )
    return await service.create_pro(ADMIN, solution.id, "Enables reuse.")


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_tally_and_current_vote(self, unit_env):
        """A first upvote should report tally 1 and current vote 1."""
        # Arrange
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)
        pro = await _make_pro(service, ["a@x.com"])
        alice = make_principal("a@x.com")

        # Act
        response = await use_case.execute(
            CastVoteRequest(principal=alice, procon_id=pro.id, value=1)
        )

        # Assert
        assert response.procon_id == str(pro.id)
        assert response.tally == 1
        assert response.current_vote == 1
        assert response.changed is True

    @pytest.mark.asyncio
    async def test_switching_vote_moves_tally_by_two(self, unit_env):
        """Flipping +1 to -1 should move the tally from 1 to -1."""
        # Arrange
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)
        pro = await _make_pro(service, ["a@x.com"])
        alice = make_principal("a@x.com")
        await use_case.execute(CastVoteRequest(principal=alice, procon_id=pro.id, value=1))

        # Act
        response = await use_case.execute(
            CastVoteRequest(principal=alice, procon_id=pro.id, value=-1)
        )

        # Assert
        assert response.tally == -1
        assert response.current_vote == -1

    @pytest.mark.asyncio
    async def test_repeat_vote_reports_unchanged(self, unit_env):
        """Casting the held value again should be a no-op."""
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)
        pro = await _make_pro(service, ["a@x.com"])
        request = CastVoteRequest(
            principal=make_principal("a@x.com"), procon_id=pro.id, value=-1
        )

        await use_case.execute(request)
        response = await use_case.execute(request)

        assert response.tally == -1
        assert response.changed is False

    @pytest.mark.asyncio
    async def test_out_of_range_value_reaches_ledger(self, unit_env):
        """Integers other than +1/-1 should fail with invalid-value."""
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)
        pro = await _make_pro(service, ["a@x.com"])

        with pytest.raises(InvalidVoteValueError):
            await use_case.execute(
                CastVoteRequest(
                    principal=make_principal("a@x.com"), procon_id=pro.id, value=2
                )
            )

    def test_boolean_value_is_rejected_by_request_model(self):
        """True must not pass for +1."""
        with pytest.raises(PydanticValidationError):
            CastVoteRequest(
                principal=make_principal("a@x.com"), procon_id=uuid4(), value=True
            )

    @pytest.mark.asyncio
    async def test_unlisted_principal_is_denied(self, unit_env):
        """Principals off the allow-list should be denied."""
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)
        pro = await _make_pro(service, ["a@x.com"])

        with pytest.raises(AccessDeniedError):
            await use_case.execute(
                CastVoteRequest(
                    principal=make_principal("b@x.com"), procon_id=pro.id, value=1
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_procon_is_not_found(self, unit_env):
        """Voting on an unknown item should raise NotFoundError."""
        service = await unit_env.get(QuestionService)
        use_case = CastVoteUseCase(question_service=service)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(principal=ADMIN, procon_id=uuid4(), value=1)
            )
