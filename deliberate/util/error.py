"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


def validate_production_settings(settings) -> None:
    """Refuse to start a production deployment with development secrets.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If a required production value is missing
    """
    if settings.environment != "production":
        return

    problems = []
    if settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION":
        problems.append("AUTH__JWT_SECRET must be set")
    if not settings.auth.admin_emails:
        problems.append("AUTH__ADMIN_EMAILS must list at least one admin")
    if "localhost" in settings.database.url:
        problems.append("DATABASE__URL must point at the production database")

    if problems:
        raise ConfigurationError(
            "Invalid production configuration: " + "; ".join(problems)
        )
