"""Property search: turns a sparse set of filters into one parameterized query.

The statement uses `$n` positional placeholders; params[n-1] binds to `$n`.
Only column names and keywords are interpolated into the text, never values.
"""
from __future__ import annotations

from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

# Listing prices are stored in cents.
PRICE_SCALE = 100

_BASE_SQL = (
    "SELECT properties.*, avg(property_reviews.rating) as average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_id\n"
)


class FilterSet(BaseModel):
    """Optional search criteria. A field counts as present when it is not None."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None


class BuiltQuery(NamedTuple):
    text: str
    params: tuple[Any, ...]


def _to_cents(price: float) -> int:
    return int(round(price * PRICE_SCALE))


def clause_keyword(params: list) -> str:
    # first bound value anchors the WHERE
    return "WHERE" if len(params) == 1 else "AND"


def build(filters: FilterSet, limit: int = 10) -> BuiltQuery:
    # (field, column, operator, transform) in fixed emission order
    predicates = (
        ("city", "city", "LIKE", lambda v: f"%{v}%"),
        ("owner_id", "owner_id", "=", None),
        ("minimum_price_per_night", "cost_per_night", ">=", _to_cents),
        ("maximum_price_per_night", "cost_per_night", "<=", _to_cents),
        ("minimum_rating", "rating", ">=", None),
    )

    params: list[Any] = []
    text = _BASE_SQL
    for field, column, op, transform in predicates:
        value = getattr(filters, field)
        if value is None:
            continue
        params.append(transform(value) if transform else value)
        text += f"{clause_keyword(params)} {column} {op} ${len(params)}\n"

    params.append(limit)
    text += (
        "GROUP BY properties.id\n"
        "ORDER BY cost_per_night\n"
        f"LIMIT ${len(params)}"
    )
    return BuiltQuery(text, tuple(params))
