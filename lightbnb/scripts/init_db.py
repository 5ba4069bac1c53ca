"""Create the LightBnB tables in a SQLite database.

Usage:
  python -m lightbnb.scripts.init_db [--db PATH]
"""
from __future__ import annotations

import argparse
import logging

from ..services.schema_svc import ensure_schema


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Initialize the LightBnB database schema")
    ap.add_argument("--db", default=None, help="SQLite file path (default: resolved from env/config.yaml)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    path = ensure_schema(args.db)
    print(f"[init_db] schema ready at {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
