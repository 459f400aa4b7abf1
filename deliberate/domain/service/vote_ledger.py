"""Vote ledger domain service.

The ledger records each principal's current vote per pro/con and derives
tallies from it. Tallies are never stored: they are recomputed as the sum of
current vote values, so they cannot drift from the votes themselves.
"""

from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from deliberate.domain.error import ConflictError, InvalidVoteValueError
from deliberate.domain.model import Principal, Vote, VoteResult, VoteState
from deliberate.domain.model.common import utcnow
from deliberate.domain.repository import VoteRepository
from deliberate.domain.value import ProConId, UserId, VoteValue

from .base import Service


class VoteLedger(Service):
    """Domain service for vote operations.

    Access checks on the item's question are the caller's job.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote ledger.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(
        self, principal: Principal, procon_id: ProConId, value: int
    ) -> VoteResult:
        """Record a principal's vote on a pro/con.

        Casting the value the principal already holds is a no-op that returns
        the current state. A different value overwrites the previous one.
        There is no way to withdraw a vote.

        Args:
            principal: Voting principal
            procon_id: Pro/con ID
            value: +1 or -1

        Returns:
            New tally and the principal's resulting vote

        Raises:
            InvalidVoteValueError: If value is not +1 or -1
            ConflictError: If the write raced with a conflicting change
        """
        if not VoteValue.is_valid(value):
            logfire.warn(
                "Invalid vote value",
                procon_id=str(procon_id),
                user_id=str(principal.id),
                value=repr(value),
            )
            raise InvalidVoteValueError(value)

        vote_value = VoteValue(value)

        with logfire.span(
            "vote_ledger.cast_vote",
            procon_id=str(procon_id),
            user_id=str(principal.id),
            value=int(vote_value),
        ):
            now = utcnow()
            vote = Vote(
                user_id=principal.id,
                procon_id=procon_id,
                value=vote_value,
                created_at=now,
                updated_at=now,
            )

            try:
                changed = await self.vote_repository.upsert(vote)
            except IntegrityError as e:
                logfire.warn(
                    "Vote write conflict",
                    procon_id=str(procon_id),
                    user_id=str(principal.id),
                    error=str(e.orig) if e.orig else str(e),
                )
                raise ConflictError(
                    f"Vote on {procon_id} conflicted with a concurrent change"
                ) from e

            tally = await self.vote_repository.tally(procon_id)

            if changed:
                logfire.info(
                    "Vote recorded",
                    procon_id=str(procon_id),
                    user_id=str(principal.id),
                    value=int(vote_value),
                    tally=tally,
                )
            else:
                logfire.info(
                    "Vote already set",
                    procon_id=str(procon_id),
                    user_id=str(principal.id),
                    value=int(vote_value),
                )

            return VoteResult(tally=tally, current_vote=vote_value, changed=changed)

    async def get_vote_state(
        self, principal: Principal, procon_id: ProConId
    ) -> VoteState:
        """Tally and own vote for a single pro/con.

        Args:
            principal: Requesting principal
            procon_id: Pro/con ID

        Returns:
            Vote state from one ledger read
        """
        states = await self.get_vote_states(principal, [procon_id])
        return states[procon_id]

    async def get_vote_states(
        self, principal: Principal, procon_ids: Sequence[ProConId]
    ) -> dict[ProConId, VoteState]:
        """Tally and own vote for several pro/cons.

        Args:
            principal: Requesting principal
            procon_ids: Pro/con IDs

        Returns:
            Mapping of every requested ID to its vote state
        """
        if not procon_ids:
            return {}

        with logfire.span(
            "vote_ledger.get_vote_states",
            user_id=str(principal.id),
            count=len(procon_ids),
        ):
            # Batch query to fetch all states at once (avoid N+1)
            states = await self.vote_repository.vote_states(principal.id, procon_ids)
            return {pid: states.get(pid, VoteState()) for pid in procon_ids}

    async def voters(
        self, procon_ids: Sequence[ProConId]
    ) -> dict[ProConId, set[UserId]]:
        """Users holding a current vote on each pro/con.

        Items without votes are absent from the result.
        """
        if not procon_ids:
            return {}
        return await self.vote_repository.voters(procon_ids)

    async def recompute_tally(self, procon_id: ProConId) -> int:
        """Recompute a tally from the individual votes.

        Args:
            procon_id: Pro/con ID

        Returns:
            Sum of every current vote value
        """
        votes = await self.vote_repository.find_by_procon(procon_id)
        return sum(int(vote.value) for vote in votes)

    async def purge(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete the votes of removed pros/cons.

        Only used when an admin deletes a question.

        Args:
            procon_ids: IDs of removed pros/cons

        Returns:
            Number of deleted votes
        """
        if not procon_ids:
            return 0
        deleted = await self.vote_repository.delete_by_procons(procon_ids)
        logfire.info("Votes purged", procons=len(procon_ids), votes=deleted)
        return deleted
