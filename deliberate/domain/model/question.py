"""Question aggregate root.

Questions are posted by administrators and gated by an allow-list of
invited emails. A question owns its solutions.
"""

from datetime import datetime

from pydantic import Field, field_validator

from deliberate.domain.model.common import DomainModel, utcnow
from deliberate.domain.value import Email, QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Lifecycle: created active, may be deactivated (hidden from non-admins),
    and may be deleted by an admin, which removes everything beneath it.
    """

    id: QuestionId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    owner_id: UserId
    allowed_emails: list[Email] = Field(default_factory=list)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("allowed_emails")
    @classmethod
    def deduplicate_emails(cls, v: list[Email]) -> list[Email]:
        """Drop duplicate emails while keeping the caller's order."""
        seen: set[str] = set()
        unique = []
        for email in v:
            if email.root not in seen:
                seen.add(email.root)
                unique.append(email)
        return unique

    def allows(self, email: Email) -> bool:
        """Check whether an email is on this question's allow-list."""
        return any(allowed.root == email.root for allowed in self.allowed_emails)
