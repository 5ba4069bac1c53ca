from __future__ import annotations

# lightbnb/db.py
import logging
import os
import re
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Sequence

import yaml

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) LIGHTBNB_DB_PATH env var (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: lightbnb.db in the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "lightbnb.db")
_SCHEMA_PATH = Path(__file__).with_name("schema.sql")

# $1, $2 ... -> ?1, ?2 ... (SQLite numbered parameters bind params[n-1])
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


class QueryExecutionError(Exception):
    """A statement failed inside the database driver."""

    def __init__(self, message: str, text: str, params: Sequence[Any] = ()):
        super().__init__(message)
        self.message = message
        self.text = text
        self.params = tuple(params)


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        out = {}
        for k in ("db_path", "test_db_path"):
            v = cfg.get(k)
            if isinstance(v, str) and v.strip():
                out[k] = v.strip()
        return out
    except (OSError, yaml.YAMLError, AttributeError):
        logger.warning("ignoring unreadable config file %s", cfg_path)
        return {}


def get_db_path() -> str:
    env_path = os.environ.get("LIGHTBNB_DB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection for the duration of the block.

    Uses the explicit db_path when given, otherwise get_db_path().
    Foreign keys are on and rows come back as sqlite3.Row.
    The connection is always closed on exit; uncommitted work is discarded.
    """
    path = db_path or get_db_path()
    conn = sqlite3.connect(
        path,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        check_same_thread=False,
    )
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


def to_sqlite_placeholders(text: str) -> str:
    return _PLACEHOLDER_RE.sub(r"?\1", text)


def execute(conn: sqlite3.Connection, text: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
    """
    Run a `$n`-parameterized statement and return every row it produces.

    Driver failures are logged and re-raised as QueryExecutionError so callers
    can tell "no rows" apart from "query failed".
    """
    try:
        return conn.execute(to_sqlite_placeholders(text), tuple(params)).fetchall()
    except (sqlite3.Error, OverflowError) as e:
        logger.error("query failed: %s | sql=%s", e, " ".join(text.split()))
        raise QueryExecutionError(str(e), text, params) from e


def load_schema_sql() -> str:
    return _SCHEMA_PATH.read_text(encoding="utf-8")
