"""In-memory vote repository for testing."""

import asyncio
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from deliberate.domain.model.vote import Vote, VoteState
from deliberate.domain.repository.procon import ProConRepository
from deliberate.domain.repository.vote import VoteRepository
from deliberate.domain.value import ProConId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user_id, procon_id), mirroring the unique constraint
    of the votes table. When a pro/con repository is supplied, writes to a
    missing pro/con fail like the foreign key would.
    """

    def __init__(self, procon_repository: Optional[ProConRepository] = None) -> None:
        self._votes: dict[tuple[UserId, ProConId], Vote] = {}
        self._lock = asyncio.Lock()
        self._procon_repository = procon_repository

    async def find_by_user_and_procon(
        self, user_id: UserId, procon_id: ProConId
    ) -> Optional[Vote]:
        """Find a user's current vote on a pro/con."""
        return self._votes.get((user_id, procon_id))

    async def find_by_procon(self, procon_id: ProConId) -> list[Vote]:
        """Find all current votes on a pro/con."""
        return [v for v in self._votes.values() if v.procon_id == procon_id]

    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote or overwrite the user's existing value.

        Raises:
            IntegrityError: If the pro/con does not exist
        """
        async with self._lock:
            if self._procon_repository is not None:
                if await self._procon_repository.find_by_id(vote.procon_id) is None:
                    raise IntegrityError(
                        "Vote references missing pro/con", None, Exception()
                    )

            key = (vote.user_id, vote.procon_id)
            existing = self._votes.get(key)
            if existing is None:
                self._votes[key] = vote
                return True
            if existing.value == vote.value:
                return False

            self._votes[key] = existing.model_copy(
                update={"value": vote.value, "updated_at": vote.updated_at}
            )
            return True

    async def tally(self, procon_id: ProConId) -> int:
        """Sum of all current vote values on a pro/con."""
        return sum(int(v.value) for v in self._votes.values() if v.procon_id == procon_id)

    async def vote_states(
        self, user_id: UserId, procon_ids: Sequence[ProConId]
    ) -> dict[ProConId, VoteState]:
        """Tally and own vote for several pro/cons."""
        states: dict[ProConId, VoteState] = {}
        for procon_id in procon_ids:
            own = self._votes.get((user_id, procon_id))
            states[procon_id] = VoteState(
                tally=await self.tally(procon_id),
                own_vote=own.value if own else None,
            )
        return states

    async def voters(
        self, procon_ids: Sequence[ProConId]
    ) -> dict[ProConId, set[UserId]]:
        """Current voters of several pro/cons."""
        wanted = set(procon_ids)
        voters: dict[ProConId, set[UserId]] = {}
        for user_id, procon_id in self._votes:
            if procon_id in wanted:
                voters.setdefault(procon_id, set()).add(user_id)
        return voters

    async def delete_by_procons(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete every vote on the given pro/cons."""
        doomed = set(procon_ids)
        keys = [key for key in self._votes if key[1] in doomed]
        for key in keys:
            del self._votes[key]
        return len(keys)
