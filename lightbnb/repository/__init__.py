"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Statements use `$n` placeholders and run through `db.execute`.
"""
from __future__ import annotations
