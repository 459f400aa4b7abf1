"""Test configuration and fixtures."""

from uuid import uuid4

from deliberate.config import AuthSettings
from deliberate.domain.model import Principal
from deliberate.domain.value import Email, UserId
from deliberate.util.jwt import create_token


def make_principal(email: str, is_admin: bool = False) -> Principal:
    """Helper function to build an authenticated principal for tests.

    Args:
        email: Principal's email (normalized by the Email value object)
        is_admin: Whether the principal is on the admin allow-list

    Returns:
        Principal with a fresh user ID
    """
    return Principal(id=UserId(uuid4()), email=Email(email), is_admin=is_admin)


def make_token(principal: Principal, settings: AuthSettings) -> str:
    """Helper function to sign a session cookie for a principal.

    Admin status is not part of the token; the API derives it from
    ``settings.admin_emails``.
    """
    return create_token(str(principal.id), principal.email.root, settings)
