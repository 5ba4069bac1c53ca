from __future__ import annotations

from typing import Any, Mapping

from ..db import get_conn
from ..domain.models import NewProperty
from ..domain.property_search import FilterSet
from ..logs import LogContext
from ..repository import property_repo


def get_all_properties(filters: FilterSet | Mapping[str, Any] | None = None, limit: int = 10) -> list[dict]:
    """
    Search listings, cheapest first.

    Args:
        filters: FilterSet, or a plain mapping of its fields (validated into one)
        limit: max rows returned

    Returns:
        property rows with `average_rating`
    """
    if filters is None:
        filters = FilterSet()
    elif not isinstance(filters, FilterSet):
        filters = FilterSet.model_validate(dict(filters))
    with get_conn() as conn:
        return property_repo.search(conn, filters, limit)


def add_property(prop: NewProperty, log: LogContext) -> dict:
    log.set_payload(prop.model_dump())
    try:
        with get_conn() as conn:
            row = property_repo.insert(conn, prop)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.set_entity("PROPERTY", row["id"])
    log.set_after(row)
    log.write()
    return row
