"""Vote ledger entries.

A vote is a relation, not a list: each (user, pro/con) pair holds at most
one current value. There is no "no vote" row; absence means no vote.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from deliberate.domain.model.common import DomainModel, utcnow
from deliberate.domain.value import ProConId, UserId, VoteValue
from deliberate.domain.value.common import ValueObject


class Vote(DomainModel):
    """Current vote of one user on one pro/con.

    Business rules:
    - One row per (user_id, procon_id) (enforced by database unique constraint)
    - Value is +1 or -1; a later distinct vote overwrites the row
    - Votes are never deleted in normal operation
    """

    user_id: UserId
    procon_id: ProConId
    value: VoteValue
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class VoteState(ValueObject):
    """Tally and own vote for one item, taken from a single ledger read."""

    tally: int = 0
    own_vote: Optional[VoteValue] = None


class VoteResult(ValueObject):
    """Outcome of casting a vote."""

    tally: int
    current_vote: VoteValue
    changed: bool
