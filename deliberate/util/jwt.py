"""Session token encoding.

Tokens are HS256 JWTs carrying the principal's user id and verified email.
Admin status is deliberately absent: it is recomputed from configuration on
every request, so revoking an admin takes effect immediately.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from deliberate.config import AuthSettings

_REQUIRED_CLAIMS = ["exp", "user_id", "email"]


class TokenPayload(BaseModel):
    """Claims of a session token."""

    user_id: str
    email: str
    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """Token is missing claims, malformed, badly signed or expired."""


def create_token(user_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a session token.

    Args:
        user_id: Principal's user ID
        email: Principal's verified email
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return TokenPayload(**claims)
    except ValidationError as e:
        raise JWTError("Malformed token payload") from e
