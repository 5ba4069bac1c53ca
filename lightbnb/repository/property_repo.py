from __future__ import annotations

from sqlite3 import Connection

from ..db import execute
from ..domain.models import NewProperty, PROPERTY_COLUMNS
from ..domain.property_search import FilterSet, build


def search(conn: Connection, filters: FilterSet, limit: int = 10) -> list[dict]:
    query = build(filters, limit)
    return [dict(r) for r in execute(conn, query.text, query.params)]


def insert(conn: Connection, prop: NewProperty) -> dict:
    cols = ", ".join(PROPERTY_COLUMNS)
    placeholders = ", ".join(f"${i}" for i in range(1, len(PROPERTY_COLUMNS) + 1))
    rows = execute(
        conn,
        f"INSERT INTO properties ({cols}) VALUES ({placeholders}) RETURNING *",
        tuple(getattr(prop, c) for c in PROPERTY_COLUMNS),
    )
    return dict(rows[0])
