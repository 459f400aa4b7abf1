"""Principal resolution for API routes."""

from deliberate.domain.model import Principal
from deliberate.domain.service import JWTService
from deliberate.interface.error import AuthenticationRequiredError


def require_principal(jwt_service: JWTService, auth_token: str | None) -> Principal:
    """Resolve the principal behind the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Returns:
        Authenticated principal

    Raises:
        AuthenticationRequiredError: If the token is missing, invalid or expired
    """
    principal = jwt_service.get_principal_from_token(auth_token)
    if principal is None:
        raise AuthenticationRequiredError("Authentication required")
    return principal
