"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from deliberate.config import AuthSettings
from deliberate.domain.service import JWTService
from deliberate.util.jwt import JWTError


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret", admin_emails=["Root@X.com"])


class TestGetPrincipalFromToken:
    """Tests for get_principal_from_token."""

    def test_valid_token_yields_principal(self, auth_settings):
        """A signed token should resolve to a principal with a normalized email."""
        # Arrange
        service = JWTService(auth_settings)
        user_id = uuid4()
        token = service.create_token(str(user_id), "Alice@Example.com")

        # Act
        principal = service.get_principal_from_token(token)

        # Assert
        assert principal is not None
        assert principal.id == user_id
        assert principal.email.root == "alice@example.com"
        assert principal.is_admin is False

    def test_admin_flag_comes_from_settings(self, auth_settings):
        """Emails on the admin list should produce admin principals."""
        service = JWTService(auth_settings)
        token = service.create_token(str(uuid4()), "root@x.com")

        principal = service.get_principal_from_token(token)

        assert principal is not None
        assert principal.is_admin is True

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_garbage_token(self, auth_settings, token):
        """Missing or unparseable tokens should yield None."""
        service = JWTService(auth_settings)

        assert service.get_principal_from_token(token) is None

    def test_token_signed_with_other_secret(self, auth_settings):
        """Tokens from another issuer should yield None."""
        service = JWTService(auth_settings)
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()), "a@x.com")

        assert service.get_principal_from_token(token) is None

    def test_expired_token(self, auth_settings):
        """Expired tokens should yield None."""
        service = JWTService(auth_settings)
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "email": "a@x.com",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        assert service.get_principal_from_token(token) is None

    def test_malformed_claims(self, auth_settings):
        """Valid signatures with unusable claims should yield None."""
        service = JWTService(auth_settings)
        token = service.create_token("not-a-uuid", "a@x.com")
        bad_email = service.create_token(str(uuid4()), "nobody")

        assert service.get_principal_from_token(token) is None
        assert service.get_principal_from_token(bad_email) is None


class TestVerifyToken:
    """Tests for verify_token."""

    def test_verify_raises_on_invalid(self, auth_settings):
        """verify_token should raise JWTError rather than return None."""
        service = JWTService(auth_settings)

        with pytest.raises(JWTError):
            service.verify_token("garbage")
