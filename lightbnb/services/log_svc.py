from __future__ import annotations

from ..logs import search_logs

MAX_PAGE_SIZE = 200


def search_operation_logs(
    query: str | None = None,
    action: str | None = None,
    ts_from: str | None = None,
    ts_to: str | None = None,
    page: int = 1,
    size: int = 20,
) -> dict:
    """Audit entries, newest first. Out-of-range paging is clamped."""
    page = max(1, page)
    size = min(max(1, size), MAX_PAGE_SIZE)
    total, items = search_logs(query, action, ts_from, ts_to, page, size)
    return {"total": total, "page": page, "size": size, "items": items}
