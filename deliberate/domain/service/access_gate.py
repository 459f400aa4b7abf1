"""Access gate for question content.

Confidentiality policy:

- Admins may read and write everything, including inactive questions.
- Everyone else may read and write a question only while it is active and
  their email is on its allow-list.
- An inactive question is reported as *not found* to non-admins, so an
  uninvited principal cannot confirm that it exists.
- An active question whose allow-list lacks the principal is reported as
  *access denied*.

The gate is pure: callers fetch the question first and pass it in. Admin
status comes from the principal, never from ambient configuration.
"""

import logfire

from deliberate.domain.error import AccessDeniedError, NotAdminError, NotFoundError
from deliberate.domain.model import Principal, Question

from .base import Service


class AccessGate(Service):
    """Per-request read/write predicates over a question."""

    def can_read(self, principal: Principal, question: Question) -> bool:
        """Whether the principal may see the question's content."""
        if principal.is_admin:
            return True
        return question.is_active and question.allows(principal.email)

    def can_write(self, principal: Principal, question: Question) -> bool:
        """Whether the principal may add solutions, pros/cons and votes."""
        return self.can_read(principal, question)

    def can_administer(self, principal: Principal) -> bool:
        """Whether the principal may change question metadata."""
        return principal.is_admin

    def check_read(self, principal: Principal, question: Question) -> None:
        """Raise the policy error if the principal may not read the question.

        Raises:
            NotFoundError: Question is inactive and principal is not admin
            AccessDeniedError: Question is active but principal is not listed
        """
        if self.can_read(principal, question):
            return
        self._deny(principal, question, operation="read")

    def check_write(self, principal: Principal, question: Question) -> None:
        """Raise the policy error if the principal may not write under the question.

        Raises:
            NotFoundError: Question is inactive and principal is not admin
            AccessDeniedError: Question is active but principal is not listed
        """
        if self.can_write(principal, question):
            return
        self._deny(principal, question, operation="write")

    def require_admin(self, principal: Principal, action: str) -> None:
        """Raise unless the principal is an admin.

        Raises:
            NotAdminError: Principal is not an admin
        """
        if not self.can_administer(principal):
            logfire.warn(
                "Admin action refused", action=action, user_id=str(principal.id)
            )
            raise NotAdminError(action, str(principal.id))

    @staticmethod
    def _deny(principal: Principal, question: Question, operation: str) -> None:
        if not question.is_active:
            # Hide inactive questions entirely from non-admins
            logfire.info(
                "Inactive question hidden",
                question_id=str(question.id),
                user_id=str(principal.id),
                operation=operation,
            )
            raise NotFoundError("Question", str(question.id))

        logfire.warn(
            "Question access denied",
            question_id=str(question.id),
            user_id=str(principal.id),
            operation=operation,
        )
        raise AccessDeniedError("question", str(question.id), str(principal.id))
