#!/usr/bin/env python3
"""Apply alembic migrations to the database at DATABASE__URL.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py base       # drop the whole schema
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from deliberate.config import Settings
from deliberate.util.logging import setup_logging
from deliberate.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Move the schema to the requested revision."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "revision",
        nargs="?",
        default="head",
        help="Target revision: 'head' upgrades, 'base' or an older id downgrades",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    # migrations/env.py takes the URL from Settings, not from alembic.ini
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span("migrations.run", revision=args.revision):
        try:
            if args.revision == "base":
                if settings.environment == "production":
                    logfire.error("Refusing to downgrade a production database")
                    return 1
                command.downgrade(alembic_cfg, "base")
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must fail rather than start against a broken schema
            raise

    logfire.info("Database migrations applied", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
