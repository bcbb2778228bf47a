#!/usr/bin/env python3
"""Apply Alembic migrations up to a target revision (default: head)."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from gallery.config import Settings
from gallery.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Database migrations completed", revision=revision)
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Don't let the app start on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
