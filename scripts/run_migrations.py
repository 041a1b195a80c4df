#!/usr/bin/env python3
"""Apply the comment schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade (or downgrade) to a revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from comet.config import Settings
from comet.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the schema to the requested revision, logging failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("migrations.run", target=target, environment=settings.environment):
        try:
            if target.startswith("-") or target == "base":
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so a deploy never starts against a broken schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
