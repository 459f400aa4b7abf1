"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from deliberate.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Polarity(str, Enum):
    """Whether a pro/con argues for or against its solution."""

    PRO = "pro"
    CON = "con"


class VoteValue(IntEnum):
    """A single principal's vote on a pro/con."""

    UP = 1
    DOWN = -1

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Check a raw value without raising.

        bool is rejected explicitly because True == 1 in Python.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value in (cls.UP.value, cls.DOWN.value)


class Email(RootValueObject[str]):
    """Email address used for allow-list membership.

    Stored trimmed and lower-cased so that membership checks are
    case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError(f"Invalid email address: {v!r}")
        return v
