#!/usr/bin/env python3
"""Mint a session token for local development.

Sessions normally come from the external identity provider. This script
signs a token with the configured secret so the API can be exercised by
hand:

    python scripts/issue_token.py alice@example.com
    curl --cookie "auth_token=<token>" http://localhost:8000/questions
"""

import argparse
import sys
import uuid

from deliberate.config import Settings
from deliberate.domain.service import JWTService
from deliberate.domain.value import Email
from deliberate.util.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> int:
    """Print a signed token for the given email."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Email the session belongs to")
    parser.add_argument(
        "--user-id",
        default=None,
        help="User UUID (a stable one is derived from the email by default)",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)

    if settings.environment == "production":
        logger.error("Refusing to mint tokens in production")
        return 1

    try:
        email = Email(args.email)
    except ValueError:
        logger.error("Invalid email address: %s", args.email)
        return 1

    user_id = args.user_id or str(uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email}"))

    jwt_service = JWTService(settings.auth)
    token = jwt_service.create_token(user_id, email.root)

    role = "admin" if jwt_service.is_admin(email) else "member"
    logger.info("Issued %s token for %s (user %s)", role, email, user_id)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
