"""Integration tests for PostgresVoteRepository.

These tests need PostgreSQL at DATABASE__URL with migrations applied. They
check the properties that only the database can give: the unique
(user, pro/con) constraint, the atomic upsert and the foreign key.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from deliberate.domain.model import ProCon, Question, Solution, Vote
from deliberate.domain.repository import (
    ProConRepository,
    QuestionRepository,
    SolutionRepository,
    VoteRepository,
)
from deliberate.domain.value import (
    Email,
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
    VoteValue,
)
from deliberate.persistence.repository import (
    PostgresProConRepository,
    PostgresQuestionRepository,
    PostgresSolutionRepository,
    PostgresVoteRepository,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


def _question() -> Question:
    return Question(
        id=QuestionId(uuid4()),
        title="Integration question",
        description="Created by the vote repository tests.",
        owner_id=UserId(uuid4()),
        allowed_emails=[Email("a@x.com")],
    )


def _solution(question_id: QuestionId) -> Solution:
    return Solution(
        id=SolutionId(uuid4()),
        question_id=question_id,
        author_id=UserId(uuid4()),
        title="Integration solution",
        content="Body",
    )


def _procon(solution_id: SolutionId) -> ProCon:
    return ProCon(
        id=ProConId(uuid4()),
        solution_id=solution_id,
        author_id=UserId(uuid4()),
        polarity=Polarity.PRO,
        content="Integration pro",
    )


def _vote(user_id: UserId, procon_id: ProConId, value: VoteValue) -> Vote:
    return Vote(user_id=user_id, procon_id=procon_id, value=value)


async def _make_procon(integration_env) -> ProCon:
    question = await (await integration_env.get(QuestionRepository)).save(_question())
    solution = await (await integration_env.get(SolutionRepository)).save(
        _solution(question.id)
    )
    return await (await integration_env.get(ProConRepository)).save(
        _procon(solution.id)
    )


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_reports_changes(self, integration_env):
        """Insert and overwrite report True, repeating a value reports False."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        procon = await _make_procon(integration_env)
        user_id = UserId(uuid4())

        # Act
        inserted = await vote_repo.upsert(_vote(user_id, procon.id, VoteValue.UP))
        repeated = await vote_repo.upsert(_vote(user_id, procon.id, VoteValue.UP))
        flipped = await vote_repo.upsert(_vote(user_id, procon.id, VoteValue.DOWN))

        # Assert
        assert (inserted, repeated, flipped) == (True, False, True)
        votes = await vote_repo.find_by_procon(procon.id)
        assert len(votes) == 1
        assert votes[0].value == VoteValue.DOWN
        assert await vote_repo.tally(procon.id) == -1

    @pytest.mark.asyncio
    async def test_vote_states_in_one_query(self, integration_env):
        """Batch states should cover voted and unvoted items."""
        vote_repo = await integration_env.get(VoteRepository)
        voted = await _make_procon(integration_env)
        unvoted = await _make_procon(integration_env)
        me = UserId(uuid4())

        await vote_repo.upsert(_vote(me, voted.id, VoteValue.DOWN))
        await vote_repo.upsert(_vote(UserId(uuid4()), voted.id, VoteValue.DOWN))
        await vote_repo.upsert(_vote(UserId(uuid4()), voted.id, VoteValue.UP))

        states = await vote_repo.vote_states(me, [voted.id, unvoted.id])

        assert states[voted.id].tally == -1
        assert states[voted.id].own_vote == VoteValue.DOWN
        assert states[unvoted.id].tally == 0
        assert states[unvoted.id].own_vote is None

    @pytest.mark.asyncio
    async def test_voters_by_procon(self, integration_env):
        """Voters come back grouped per pro/con, unvoted items absent."""
        vote_repo = await integration_env.get(VoteRepository)
        voted = await _make_procon(integration_env)
        unvoted = await _make_procon(integration_env)
        alice, bob = UserId(uuid4()), UserId(uuid4())

        await vote_repo.upsert(_vote(alice, voted.id, VoteValue.UP))
        await vote_repo.upsert(_vote(bob, voted.id, VoteValue.DOWN))

        voters = await vote_repo.voters([voted.id, unvoted.id])

        assert voters == {voted.id: {alice, bob}}

    @pytest.mark.asyncio
    async def test_solutions_of_several_questions(self, integration_env):
        """The batch solution lookup spans every requested question."""
        question_repo = await integration_env.get(QuestionRepository)
        solution_repo = await integration_env.get(SolutionRepository)
        first = await question_repo.save(_question())
        second = await question_repo.save(_question())
        other = await question_repo.save(_question())
        a = await solution_repo.save(_solution(first.id))
        b = await solution_repo.save(_solution(second.id))
        await solution_repo.save(_solution(other.id))

        found = await solution_repo.find_by_questions([first.id, second.id])

        assert {s.id for s in found} == {a.id, b.id}

    @pytest.mark.asyncio
    async def test_missing_procon_violates_foreign_key(self, integration_env):
        """Votes on unknown items are refused and the session stays usable."""
        vote_repo = await integration_env.get(VoteRepository)
        procon = await _make_procon(integration_env)

        with pytest.raises(IntegrityError):
            await vote_repo.upsert(
                _vote(UserId(uuid4()), ProConId(uuid4()), VoteValue.UP)
            )

        # The failed write was rolled back to its savepoint only
        assert await vote_repo.tally(procon.id) == 0

    @pytest.mark.asyncio
    async def test_delete_by_procons(self, integration_env):
        """Purging removes only the listed items' votes."""
        vote_repo = await integration_env.get(VoteRepository)
        doomed = await _make_procon(integration_env)
        kept = await _make_procon(integration_env)

        await vote_repo.upsert(_vote(UserId(uuid4()), doomed.id, VoteValue.UP))
        await vote_repo.upsert(_vote(UserId(uuid4()), doomed.id, VoteValue.UP))
        await vote_repo.upsert(_vote(UserId(uuid4()), kept.id, VoteValue.UP))

        deleted = await vote_repo.delete_by_procons([doomed.id])

        assert deleted == 2
        assert await vote_repo.tally(doomed.id) == 0
        assert await vote_repo.tally(kept.id) == 1


class TestConcurrentUpserts:
    """Concurrent writers on separate connections."""

    async def _committed_procon(
        self, factory: async_sessionmaker[AsyncSession]
    ) -> ProCon:
        async with factory() as session:
            question = await PostgresQuestionRepository(session).save(_question())
            solution = await PostgresSolutionRepository(session).save(
                _solution(question.id)
            )
            procon = await PostgresProConRepository(session).save(_procon(solution.id))
            await session.commit()
            return procon

    async def _cast(
        self,
        factory: async_sessionmaker[AsyncSession],
        user_id: UserId,
        procon_id: ProConId,
        value: VoteValue,
    ) -> None:
        async with factory() as session:
            await PostgresVoteRepository(session).upsert(_vote(user_id, procon_id, value))
            await session.commit()

    @pytest.mark.asyncio
    async def test_distinct_voters_all_count(self, integration_env):
        """N concurrent voters give N rows and tally N."""
        factory = await integration_env.get(async_sessionmaker[AsyncSession])
        procon = await self._committed_procon(factory)
        voters = [UserId(uuid4()) for _ in range(4)]

        await asyncio.gather(
            *(self._cast(factory, v, procon.id, VoteValue.UP) for v in voters)
        )

        async with factory() as session:
            repo = PostgresVoteRepository(session)
            assert await repo.tally(procon.id) == len(voters)
            assert len(await repo.find_by_procon(procon.id)) == len(voters)

    @pytest.mark.asyncio
    async def test_same_voter_never_duplicates(self, integration_env):
        """Concurrent casts by one user leave exactly one row."""
        factory = await integration_env.get(async_sessionmaker[AsyncSession])
        procon = await self._committed_procon(factory)
        user_id = UserId(uuid4())

        await asyncio.gather(
            *(
                self._cast(factory, user_id, procon.id, value)
                for value in [VoteValue.UP, VoteValue.DOWN] * 2
            )
        )

        async with factory() as session:
            repo = PostgresVoteRepository(session)
            votes = await repo.find_by_procon(procon.id)
            assert len(votes) == 1
            assert await repo.tally(procon.id) == int(votes[0].value)
