from __future__ import annotations

from sqlite3 import Connection

from ..db import execute

PAST_RESERVATIONS_SQL = """
SELECT reservations.id AS reservation_id, reservations.start_date, reservations.end_date,
       reservations.property_id, reservations.guest_id,
       properties.*, avg(property_reviews.rating) as average_rating
FROM properties
JOIN reservations ON properties.id = reservations.property_id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1 AND reservations.end_date < CURRENT_DATE
GROUP BY reservations.id, properties.id
ORDER BY reservations.start_date
LIMIT $2
"""


def list_past_for_guest(conn: Connection, guest_id: int, limit: int = 10) -> list[dict]:
    """Completed stays of a guest, oldest first, with the property's average rating.

    `id` is the property id, the reservation id comes back as `reservation_id`.
    Unreviewed properties are not returned.
    """
    rows = execute(conn, PAST_RESERVATIONS_SQL, (guest_id, limit))
    return [dict(r) for r in rows]
