from __future__ import annotations

from sqlite3 import Connection

from ..db import execute


def get_by_email(conn: Connection, email: str) -> dict | None:
    rows = execute(conn, "SELECT * FROM users WHERE email = $1", (email,))
    return dict(rows[0]) if rows else None


def get_by_id(conn: Connection, user_id: int) -> dict | None:
    rows = execute(conn, "SELECT * FROM users WHERE id = $1", (user_id,))
    return dict(rows[0]) if rows else None


def insert(conn: Connection, name: str, email: str, password: str) -> dict:
    rows = execute(
        conn,
        "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
        (name, email, password),
    )
    return dict(rows[0])
