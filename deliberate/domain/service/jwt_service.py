"""JWT token domain service."""

from uuid import UUID

import logfire
from pydantic import ValidationError as PydanticValidationError

from deliberate.config import AuthSettings
from deliberate.domain.model import Principal
from deliberate.domain.value import Email, UserId
from deliberate.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Sessions are minted by an external identity provider; this service only
    verifies them and turns their claims into a principal.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str) -> str:
        """Create JWT token for user.

        Used by development tooling and tests to impersonate a principal.

        Args:
            user_id: User ID
            email: Verified email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, email, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def is_admin(self, email: Email) -> bool:
        """Whether an email is on the configured admin allow-list."""
        return email.root in self.auth_settings.admin_emails

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Resolve a principal from a JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            email = Email(payload.email)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, PydanticValidationError, ValueError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        return Principal(id=user_id, email=email, is_admin=self.is_admin(email))
