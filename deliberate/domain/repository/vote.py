"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Set

from deliberate.domain.model.vote import Vote, VoteState
from deliberate.domain.value import ProConId, UserId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Implementations must enforce uniqueness of (user_id, procon_id) at the
    storage layer and make ``upsert`` a single atomic conditional write.
    """

    @abstractmethod
    async def find_by_user_and_procon(
        self, user_id: UserId, procon_id: ProConId
    ) -> Optional[Vote]:
        """Find a user's current vote on a pro/con.

        Args:
            user_id: The user's ID
            procon_id: ID of the pro/con

        Returns:
            The vote if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_procon(self, procon_id: ProConId) -> List[Vote]:
        """Find all current votes on a pro/con.

        Args:
            procon_id: ID of the pro/con

        Returns:
            List of votes, one per voting user
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> bool:
        """Insert a vote or overwrite the user's existing value.

        The write is skipped when the stored value already equals
        ``vote.value``.

        Args:
            vote: The vote to record

        Returns:
            True if a row was inserted or changed, False if it was a no-op

        Raises:
            IntegrityError: If the pro/con no longer exists
        """
        pass

    @abstractmethod
    async def tally(self, procon_id: ProConId) -> int:
        """Sum of all current vote values on a pro/con.

        Args:
            procon_id: ID of the pro/con

        Returns:
            Signed sum, 0 when nobody voted
        """
        pass

    @abstractmethod
    async def vote_states(
        self, user_id: UserId, procon_ids: Sequence[ProConId]
    ) -> Dict[ProConId, VoteState]:
        """Tally and the user's own vote for several pro/cons.

        Each item's pair must come from one storage read.

        Args:
            user_id: The requesting user
            procon_ids: Items to look up

        Returns:
            Mapping for every requested ID (items without votes map to
            ``VoteState(tally=0, own_vote=None)``)
        """
        pass

    @abstractmethod
    async def voters(
        self, procon_ids: Sequence[ProConId]
    ) -> Dict[ProConId, Set[UserId]]:
        """Users holding a current vote on each of several pro/cons.

        Args:
            procon_ids: Items to look up

        Returns:
            Mapping of each item that has votes to its voters
        """
        pass

    @abstractmethod
    async def delete_by_procons(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete every vote on the given pro/cons (cascade helper).

        Args:
            procon_ids: IDs of deleted pro/cons

        Returns:
            Number of deleted votes
        """
        pass
