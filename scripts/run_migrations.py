#!/usr/bin/env python3
"""Upgrade the ChildGuard schema.

Usage:
    python scripts/run_migrations.py [revision]

Upgrades to ``head`` unless a revision is given. The database URL comes
from DATABASE__URL (see migrations/env.py); a failure is reported to
Logfire and re-raised so a deploy stops before the API starts against a
stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from guard.config import Settings
from guard.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def upgrade(revision: str = "head") -> None:
    """Apply migrations up to ``revision``."""
    with logfire.span("run_migrations", revision=revision):
        command.upgrade(Config(ALEMBIC_INI), revision)
        logfire.info("Schema upgraded", revision=revision)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print(__doc__, file=sys.stderr)
        return 2

    configure_logfire(Settings())

    try:
        upgrade(*args)
    except Exception as e:
        logfire.error(
            "Schema upgrade failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
