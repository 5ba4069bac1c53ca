from __future__ import annotations

from ..db import get_conn, get_db_path, load_schema_sql
from ..logs import ensure_log_schema


def ensure_schema(db_path: str | None = None) -> str:
    """Create the app tables and the audit log table if missing. Returns the DB path."""
    path = db_path or get_db_path()
    with get_conn(path) as conn:
        conn.executescript(load_schema_sql())
        conn.commit()
    ensure_log_schema(path)
    return path
