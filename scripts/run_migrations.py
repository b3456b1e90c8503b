#!/usr/bin/env python3
"""Apply Alembic migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c9a27d0b4
    python scripts/run_migrations.py --sql      # print SQL instead of running it
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from projectlink.config import Settings
from projectlink.util.logging import setup_logging
from projectlink.util.observability import configure_logfire


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upgrade the database schema")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--sql", action="store_true", help="Emit SQL to stdout (offline mode)"
    )
    parser.add_argument("--config", default="alembic.ini")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=args.revision, offline=args.sql):
        try:
            command.upgrade(Config(args.config), args.revision, sql=args.sql)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Deploys must stop here rather than start on a stale schema
            raise

    logfire.info("Database schema upgraded", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
