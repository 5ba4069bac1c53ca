from __future__ import annotations

from ..db import get_conn
from ..repository import reservation_repo


def get_all_reservations(guest_id: int, limit: int = 10) -> list[dict]:
    with get_conn() as conn:
        return reservation_repo.list_past_for_guest(conn, guest_id, limit)
