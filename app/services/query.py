"""Sorting and offset-pagination helpers shared by the token and component services."""

import math
from collections.abc import Mapping

from sqlalchemy.orm import InstrumentedAttribute, Session
from sqlalchemy.sql import ColumnElement

from app.core.errors import ValidationError


def dialect_name(db: Session) -> str:
    return db.get_bind().dialect.name


def check_paging(page: int, limit: int) -> None:
    if page < 1:
        raise ValidationError("page must be a positive integer")
    if limit < 1:
        raise ValidationError("limit must be a positive integer")


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def order_by_clauses(
    columns: Mapping[str, InstrumentedAttribute],
    id_column: InstrumentedAttribute,
    sort_by: str,
    sort_order: str,
) -> list[ColumnElement]:
    """
    ORDER BY for a camelCase API field name; 'desc' sorts descending, anything else ascending.

    The id is appended as a tie-breaker in the same direction so pages never overlap.
    """
    column = columns.get(sort_by)
    if column is None:
        raise ValidationError(
            f"Invalid sortBy '{sort_by}'. Allowed: {', '.join(sorted(columns))}"
        )
    if sort_order == "desc":
        return [column.desc(), id_column.desc()]
    return [column.asc(), id_column.asc()]
