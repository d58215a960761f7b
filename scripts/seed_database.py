#!/usr/bin/env python3
"""
Create the tables and load the initial events and sample members.

Safe to re-run: tables that already hold rows are skipped.

Usage:
  python scripts/seed_database.py
  python scripts/seed_database.py --database-url sqlite:///wineclub.db
"""

from __future__ import annotations

import argparse
import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import configure_logging, get_config  # noqa: E402
from data.connection import create_store  # noqa: E402
from data.seed import seed_database  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    ap.add_argument("--echo", action="store_true", help="Log every SQL statement")
    args = ap.parse_args(argv)

    cfg = get_config()
    configure_logging(cfg)

    store = create_store(args.database_url or cfg.database_url, echo=args.echo)
    result = seed_database(store)
    if not result.success:
        print(f"Migration failed: {result.error}", file=sys.stderr)
        return 1

    print(f"Seeded {result.events_count} events and {result.members_count} members")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
