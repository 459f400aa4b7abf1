"""Unit tests for SolutionAggregator."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from deliberate.domain.error import AccessDeniedError, NotFoundError
from deliberate.domain.model import ProCon, Question, Solution
from deliberate.domain.repository import (
    ProConRepository,
    QuestionRepository,
    SolutionRepository,
)
from deliberate.domain.service import SolutionAggregator, VoteLedger
from deliberate.domain.value import (
    Email,
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
    VoteValue,
)
from tests.conftest import make_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


async def _save_question(unit_env, allowed=("a@x.com",), is_active=True) -> Question:
    question_repo = await unit_env.get(QuestionRepository)
    question = Question(
        id=QuestionId(uuid4()),
        title="Which assay should we standardise on?",
        description="Two labs disagree on the protocol.",
        owner_id=UserId(uuid4()),
        allowed_emails=[Email(e) for e in allowed],
        is_active=is_active,
    )
    return await question_repo.save(question)


async def _save_solution(
    unit_env,
    question_id: QuestionId,
    created_at: datetime,
    solution_id: UUID | None = None,
    is_active: bool = True,
) -> Solution:
    solution_repo = await unit_env.get(SolutionRepository)
    solution = Solution(
        id=SolutionId(solution_id or uuid4()),
        question_id=question_id,
        author_id=UserId(uuid4()),
        title="Use ELISA",
        content="It is cheaper and both labs have the kit.",
        is_active=is_active,
        created_at=created_at,
        updated_at=created_at,
    )
    return await solution_repo.save(solution)


async def _save_procon(
    unit_env, solution_id: SolutionId, polarity: Polarity, created_at: datetime
) -> ProCon:
    procon_repo = await unit_env.get(ProConRepository)
    procon = ProCon(
        id=ProConId(uuid4()),
        solution_id=solution_id,
        author_id=UserId(uuid4()),
        polarity=polarity,
        content=f"{polarity.value} argument",
        created_at=created_at,
        updated_at=created_at,
    )
    return await procon_repo.save(procon)


class TestGetQuestionView:
    """Tests for get_question_view."""

    @pytest.mark.asyncio
    async def test_solutions_are_oldest_first_with_id_tiebreak(self, unit_env):
        """Solutions should be ordered by (created_at, id)."""
        aggregator = await unit_env.get(SolutionAggregator)
        question = await _save_question(unit_env)

        # Saved out of order, two of them sharing a timestamp
        late = await _save_solution(unit_env, question.id, T0 + timedelta(minutes=5))
        tie_b = await _save_solution(
            unit_env, question.id, T0, UUID("00000000-0000-0000-0000-00000000000b")
        )
        tie_a = await _save_solution(
            unit_env, question.id, T0, UUID("00000000-0000-0000-0000-00000000000a")
        )

        view = await aggregator.get_question_view(make_principal("a@x.com"), question.id)

        assert [s.id for s in view.solutions] == [tie_a.id, tie_b.id, late.id]

    @pytest.mark.asyncio
    async def test_ordering_is_stable_across_reads(self, unit_env):
        """Repeated reads without writes should return the same order."""
        aggregator = await unit_env.get(SolutionAggregator)
        question = await _save_question(unit_env)
        for _ in range(4):
            await _save_solution(unit_env, question.id, T0)
        principal = make_principal("a@x.com")

        first = await aggregator.get_question_view(principal, question.id)
        second = await aggregator.get_question_view(principal, question.id)

        assert [s.id for s in first.solutions] == [s.id for s in second.solutions]

    @pytest.mark.asyncio
    async def test_pros_and_cons_are_split_and_ordered(self, unit_env):
        """Each solution should list its pros and cons separately, oldest first."""
        aggregator = await unit_env.get(SolutionAggregator)
        question = await _save_question(unit_env)
        solution = await _save_solution(unit_env, question.id, T0)

        pro_late = await _save_procon(
            unit_env, solution.id, Polarity.PRO, T0 + timedelta(minutes=2)
        )
        con = await _save_procon(unit_env, solution.id, Polarity.CON, T0)
        pro_early = await _save_procon(
            unit_env, solution.id, Polarity.PRO, T0 + timedelta(minutes=1)
        )

        view = await aggregator.get_question_view(make_principal("a@x.com"), question.id)

        [solution_view] = view.solutions
        assert [p.id for p in solution_view.pros] == [pro_early.id, pro_late.id]
        assert [c.id for c in solution_view.cons] == [con.id]

    @pytest.mark.asyncio
    async def test_vote_state_is_per_principal(self, unit_env):
        """Tallies are shared while own_vote reflects the requester."""
        aggregator = await unit_env.get(SolutionAggregator)
        ledger = await unit_env.get(VoteLedger)
        question = await _save_question(unit_env, allowed=("a@x.com", "b@x.com"))
        solution = await _save_solution(unit_env, question.id, T0)
        pro = await _save_procon(unit_env, solution.id, Polarity.PRO, T0)
        alice = make_principal("a@x.com")
        bob = make_principal("b@x.com")

        await ledger.cast_vote(alice, pro.id, 1)
        await ledger.cast_vote(bob, pro.id, 1)

        alice_view = await aggregator.get_question_view(alice, question.id)
        admin_view = await aggregator.get_question_view(
            make_principal("root@x.com", is_admin=True), question.id
        )

        alice_pro = alice_view.solutions[0].pros[0]
        admin_pro = admin_view.solutions[0].pros[0]
        assert alice_pro.tally == admin_pro.tally == 2
        assert alice_pro.own_vote == VoteValue.UP
        assert admin_pro.own_vote is None

    @pytest.mark.asyncio
    async def test_inactive_solutions_are_admin_only(self, unit_env):
        """Inactive solutions should be hidden from non-admins."""
        aggregator = await unit_env.get(SolutionAggregator)
        question = await _save_question(unit_env)
        visible = await _save_solution(unit_env, question.id, T0)
        hidden = await _save_solution(
            unit_env, question.id, T0 + timedelta(seconds=1), is_active=False
        )

        member_view = await aggregator.get_question_view(
            make_principal("a@x.com"), question.id
        )
        admin_view = await aggregator.get_question_view(
            make_principal("root@x.com", is_admin=True), question.id
        )

        assert [s.id for s in member_view.solutions] == [visible.id]
        assert [s.id for s in admin_view.solutions] == [visible.id, hidden.id]

    @pytest.mark.asyncio
    async def test_question_without_solutions(self, unit_env):
        """A fresh question should produce an empty solution list."""
        aggregator = await unit_env.get(SolutionAggregator)
        question = await _save_question(unit_env)

        view = await aggregator.get_question_view(make_principal("a@x.com"), question.id)

        assert view.question.id == question.id
        assert view.solutions == []

    @pytest.mark.asyncio
    async def test_missing_question_is_not_found(self, unit_env):
        """Unknown question IDs should raise NotFoundError."""
        aggregator = await unit_env.get(SolutionAggregator)

        with pytest.raises(NotFoundError):
            await aggregator.get_question_view(
                make_principal("root@x.com", is_admin=True), QuestionId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_access_errors_propagate(self, unit_env):
        """Gate decisions should surface unchanged."""
        aggregator = await unit_env.get(SolutionAggregator)
        active = await _save_question(unit_env)
        inactive = await _save_question(unit_env, is_active=False)

        with pytest.raises(AccessDeniedError):
            await aggregator.get_question_view(make_principal("b@x.com"), active.id)
        with pytest.raises(NotFoundError):
            await aggregator.get_question_view(make_principal("a@x.com"), inactive.id)
