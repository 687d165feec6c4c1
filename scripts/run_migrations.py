#!/usr/bin/env python3
"""Apply Alembic migrations to the comment store.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a7d2b64
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from banter.config import Settings
from banter.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Database migrations applied", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
