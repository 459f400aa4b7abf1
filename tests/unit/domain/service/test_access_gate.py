"""Unit tests for AccessGate."""

from uuid import uuid4

import pytest

from deliberate.domain.error import AccessDeniedError, NotAdminError, NotFoundError
from deliberate.domain.model import Question
from deliberate.domain.service import AccessGate
from deliberate.domain.value import Email, QuestionId, UserId
from tests.conftest import make_principal


def _question(allowed: list[str], is_active: bool = True) -> Question:
    return Question(
        id=QuestionId(uuid4()),
        title="How should we fund replication studies?",
        description="Looking for concrete funding mechanisms.",
        owner_id=UserId(uuid4()),
        allowed_emails=[Email(email) for email in allowed],
        is_active=is_active,
    )


class TestCanRead:
    """Tests for the read predicate."""

    def test_listed_principal_can_read_active_question(self):
        """Invited principal should see an active question."""
        gate = AccessGate()
        question = _question(["a@x.com"])

        assert gate.can_read(make_principal("a@x.com"), question) is True

    def test_email_match_is_case_insensitive(self):
        """Allow-list membership should ignore case."""
        gate = AccessGate()
        question = _question(["Alice@Example.COM"])

        assert gate.can_read(make_principal("alice@example.com"), question) is True

    def test_unlisted_principal_cannot_read(self):
        """Principal missing from the allow-list should be refused."""
        gate = AccessGate()
        question = _question(["a@x.com"])

        assert gate.can_read(make_principal("b@x.com"), question) is False

    def test_listed_principal_cannot_read_inactive_question(self):
        """Deactivation should hide a question from invited principals too."""
        gate = AccessGate()
        question = _question(["a@x.com"], is_active=False)

        assert gate.can_read(make_principal("a@x.com"), question) is False

    def test_admin_can_read_anything(self):
        """Admins should read inactive questions they are not listed on."""
        gate = AccessGate()
        question = _question([], is_active=False)

        assert gate.can_read(make_principal("root@x.com", is_admin=True), question)

    def test_write_follows_read(self):
        """Write access should match read access for every combination."""
        gate = AccessGate()
        principals = [
            make_principal("a@x.com"),
            make_principal("b@x.com"),
            make_principal("root@x.com", is_admin=True),
        ]
        questions = [_question(["a@x.com"]), _question(["a@x.com"], is_active=False)]

        for principal in principals:
            for question in questions:
                assert gate.can_write(principal, question) == gate.can_read(
                    principal, question
                )


class TestCheckRead:
    """Tests for the raising variants."""

    def test_inactive_question_is_not_found_for_non_admin(self):
        """Inactive questions should look missing to non-admins."""
        gate = AccessGate()
        question = _question(["a@x.com"], is_active=False)

        with pytest.raises(NotFoundError) as exc_info:
            gate.check_read(make_principal("a@x.com"), question)

        assert exc_info.value.kind == "not-found"

    def test_inactive_unlisted_question_is_not_found(self):
        """Not-found should win over access-denied for inactive questions."""
        gate = AccessGate()
        question = _question(["a@x.com"], is_active=False)

        with pytest.raises(NotFoundError):
            gate.check_write(make_principal("b@x.com"), question)

    def test_active_unlisted_question_is_access_denied(self):
        """Active questions should report access-denied to outsiders."""
        gate = AccessGate()
        question = _question(["a@x.com"])

        with pytest.raises(AccessDeniedError) as exc_info:
            gate.check_read(make_principal("b@x.com"), question)

        assert exc_info.value.kind == "access-denied"
        assert not isinstance(exc_info.value, NotAdminError)

    def test_admin_passes_checks(self):
        """Admins should pass read and write checks unconditionally."""
        gate = AccessGate()
        admin = make_principal("root@x.com", is_admin=True)
        question = _question([], is_active=False)

        gate.check_read(admin, question)
        gate.check_write(admin, question)


class TestRequireAdmin:
    """Tests for require_admin."""

    def test_non_admin_is_refused(self):
        """Non-admins should get a not-admin error."""
        gate = AccessGate()

        with pytest.raises(NotAdminError) as exc_info:
            gate.require_admin(make_principal("a@x.com"), "create questions")

        assert exc_info.value.kind == "not-admin"
        assert "create questions" in str(exc_info.value)

    def test_admin_is_allowed(self):
        """Admins should pass."""
        gate = AccessGate()

        gate.require_admin(make_principal("root@x.com", is_admin=True), "delete")
