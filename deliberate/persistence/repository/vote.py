"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence, Set

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from deliberate.domain.model import Vote, VoteState
from deliberate.domain.repository import VoteRepository
from deliberate.domain.value import ProConId, UserId, VoteValue
from deliberate.persistence.mappers import row_to_vote, vote_to_dict
from deliberate.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_procon(
        self, user_id: UserId, procon_id: ProConId
    ) -> Optional[Vote]:
        """Find a user's current vote on a pro/con."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.procon_id == procon_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_procon(self, procon_id: ProConId) -> List[Vote]:
        """Find all current votes on a pro/con."""
        stmt = select(votes_table).where(votes_table.c.procon_id == procon_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote or overwrite the user's existing value.

        A single INSERT ... ON CONFLICT DO UPDATE statement, so concurrent
        casts by the same user serialize on the unique constraint instead
        of racing a read-then-write. The WHERE clause skips the update when
        the stored value already matches, in which case nothing is returned.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[votes_table.c.user_id, votes_table.c.procon_id],
            set_={
                "value": stmt.excluded.value,
                "updated_at": stmt.excluded.updated_at,
            },
            where=votes_table.c.value != stmt.excluded.value,
        ).returning(votes_table.c.value)

        # Savepoint keeps the request transaction usable if the FK check fails
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            changed = result.fetchone() is not None
        return changed

    async def tally(self, procon_id: ProConId) -> int:
        """Sum of all current vote values on a pro/con."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.procon_id == procon_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def vote_states(
        self, user_id: UserId, procon_ids: Sequence[ProConId]
    ) -> Dict[ProConId, VoteState]:
        """Tally and own vote for several pro/cons in one query.

        Both values are aggregated from the same rows, so a request never
        sees a tally that disagrees with its own vote.
        """
        if not procon_ids:
            return {}

        own_vote = func.max(votes_table.c.value).filter(
            votes_table.c.user_id == user_id
        )
        stmt = (
            select(
                votes_table.c.procon_id,
                func.sum(votes_table.c.value).label("tally"),
                own_vote.label("own_vote"),
            )
            .where(votes_table.c.procon_id.in_(procon_ids))
            .group_by(votes_table.c.procon_id)
        )
        result = await self.session.execute(stmt)

        states: Dict[ProConId, VoteState] = {
            procon_id: VoteState() for procon_id in procon_ids
        }
        for row in result.fetchall():
            states[ProConId(row.procon_id)] = VoteState(
                tally=int(row.tally),
                own_vote=VoteValue(row.own_vote) if row.own_vote is not None else None,
            )
        return states

    async def voters(
        self, procon_ids: Sequence[ProConId]
    ) -> Dict[ProConId, Set[UserId]]:
        """Current voters of several pro/cons in one query."""
        if not procon_ids:
            return {}

        stmt = select(votes_table.c.procon_id, votes_table.c.user_id).where(
            votes_table.c.procon_id.in_(procon_ids)
        )
        result = await self.session.execute(stmt)

        voters: Dict[ProConId, Set[UserId]] = {}
        for row in result.fetchall():
            voters.setdefault(ProConId(row.procon_id), set()).add(UserId(row.user_id))
        return voters

    async def delete_by_procons(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete every vote on the given pro/cons."""
        if not procon_ids:
            return 0

        stmt = delete(votes_table).where(votes_table.c.procon_id.in_(procon_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
