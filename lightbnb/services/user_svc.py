from __future__ import annotations

from ..db import get_conn
from ..domain.models import NewUser
from ..logs import LogContext
from ..repository import user_repo


def get_user_with_email(email: str) -> dict | None:
    """Single user by email, or None when no such user exists."""
    with get_conn() as conn:
        return user_repo.get_by_email(conn, email)


def get_user_with_id(user_id: int) -> dict | None:
    with get_conn() as conn:
        return user_repo.get_by_id(conn, user_id)


def add_user(user: NewUser, log: LogContext) -> dict:
    """Insert a user and return the stored row. Failures are audited, then re-raised."""
    log.set_payload(user.model_dump())
    try:
        with get_conn() as conn:
            row = user_repo.insert(conn, user.name, user.email, user.password)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.set_entity("USER", row["id"])
    log.set_after({k: v for k, v in row.items() if k != "password"})
    log.write()
    return row
