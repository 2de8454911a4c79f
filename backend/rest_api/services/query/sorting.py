"""
Sort resolver: field name + direction token -> ORDER BY.
"""

from __future__ import annotations

from sqlalchemy import Select, asc, desc

from shared.config.constants import SortOrder
from shared.utils.exceptions import ValidationError

from .fields import FieldTable


def parse_sort_order(token: str | SortOrder | None) -> SortOrder:
    """
    Resolve a direction token, case-insensitively. ``None`` means ascending.

    Raises:
        ValidationError: Token is neither 'asc' nor 'desc'
    """
    if token is None:
        return SortOrder.ASC
    if isinstance(token, SortOrder):
        return token
    try:
        return SortOrder(token.strip().lower())
    except ValueError:
        raise ValidationError("Invalid sort order. Use 'asc' or 'desc'", sort_order=token)


def apply_sort(
    stmt: Select,
    table: FieldTable,
    sort_field: str | None = None,
    sort_order: str | SortOrder | None = None,
) -> Select:
    """
    Order ``stmt`` by ``sort_field``, with the primary key as tie-breaker.

    A blank field leaves the statement unordered and the direction is
    not looked at.
    """
    if sort_field is None or not sort_field.strip():
        return stmt

    direction = desc if parse_sort_order(sort_order) is SortOrder.DESC else asc
    spec = table.resolve(sort_field.strip())
    clauses = [direction(spec.column)]
    if spec is not table.primary_key:
        clauses.append(direction(table.primary_key.column))
    return stmt.order_by(*clauses)
