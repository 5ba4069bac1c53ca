"""Print audit log entries as JSON.

Usage:
  python -m lightbnb.scripts.show_logs [--action USER_CREATE] [--query TEXT] [--page N] [--size N]
"""
from __future__ import annotations

import argparse
import json

from ..services.log_svc import search_operation_logs


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Search the LightBnB operation log")
    ap.add_argument("--action", default=None)
    ap.add_argument("--query", default=None, help="substring matched against payload/before/after JSON")
    ap.add_argument("--from", dest="ts_from", default=None, help="ISO timestamp lower bound")
    ap.add_argument("--to", dest="ts_to", default=None, help="ISO timestamp upper bound")
    ap.add_argument("--page", type=int, default=1)
    ap.add_argument("--size", type=int, default=20)
    args = ap.parse_args(argv)

    res = search_operation_logs(args.query, args.action, args.ts_from, args.ts_to, args.page, args.size)
    print(json.dumps(res, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
