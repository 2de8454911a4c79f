"""
Query filter engine.

Turns a list of FilterCriteria and an optional free-text search term into
WHERE clauses on a SQLAlchemy ``Select``. Criteria combine with AND in
list order; the search term is OR-ed across the entity's searchable text
fields and AND-ed with the criteria.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import ColumnElement, Select, false, func, or_

from shared.utils.exceptions import FilterTypeError, ValidationError
from shared.utils.validators import escape_like_pattern

from .criteria import FilterCriteria, FilterOperator
from .fields import FieldSpec, FieldTable

ORDERABLE_TYPES: tuple[type, ...] = (int, float, Decimal, date, datetime)


def _is_orderable(python_type: type) -> bool:
    # bool subclasses int but has no meaningful ordering here
    return python_type is not bool and issubclass(python_type, ORDERABLE_TYPES)


def _like(spec: FieldSpec, pattern: str) -> ColumnElement[bool]:
    return func.lower(spec.column).like(pattern, escape="\\")


def build_condition(table: FieldTable, criteria: FilterCriteria) -> ColumnElement[bool]:
    """
    Build the predicate for a single criterion.

    Raises:
        ValidationError: Unknown property, unsupported operator, missing or
            unconvertible value
        FilterTypeError: Operator not applicable to the field's type
    """
    spec = table.resolve(criteria.property_name)
    operator = FilterOperator.parse(criteria.operator)
    column = spec.column

    if criteria.value is None:
        if operator is FilterOperator.EQUAL:
            return column.is_(None)
        if operator is FilterOperator.NOT_EQUAL:
            return column.is_not(None)
        raise ValidationError(
            f"Operator '{operator.value}' requires a value for property '{spec.name}'",
            field=spec.name,
        )

    if operator.is_ordering and not _is_orderable(spec.python_type):
        raise FilterTypeError(operator.value, spec.name, spec.python_type)
    if operator.is_text and spec.python_type is not str:
        raise FilterTypeError(operator.value, spec.name, spec.python_type)

    if operator.is_text:
        needle = escape_like_pattern(criteria.value.lower())
        if operator is FilterOperator.CONTAINS:
            return _like(spec, f"%{needle}%")
        if operator is FilterOperator.STARTS_WITH:
            return _like(spec, f"{needle}%")
        return _like(spec, f"%{needle}")

    value = spec.convert(criteria.value)

    if operator is FilterOperator.EQUAL:
        return column == value
    if operator is FilterOperator.NOT_EQUAL:
        if spec.nullable:
            return or_(column != value, column.is_(None))
        return column != value
    if operator is FilterOperator.GREATER_THAN:
        return column > value
    if operator is FilterOperator.GREATER_THAN_OR_EQUAL:
        return column >= value
    if operator is FilterOperator.LESS_THAN:
        return column < value
    return column <= value


def build_search_condition(table: FieldTable, search_term: str | None) -> ColumnElement[bool] | None:
    """
    Case-insensitive substring match of the trimmed term on any searchable field.

    Returns None when there is nothing to search for. An entity without
    searchable fields yields a predicate that matches nothing.
    """
    term = (search_term or "").strip()
    if not term:
        return None

    fields = table.searchable
    if not fields:
        return false()

    pattern = f"%{escape_like_pattern(term.lower())}%"
    return or_(*(_like(spec, pattern) for spec in fields))


def apply_filters(
    stmt: Select,
    table: FieldTable,
    filters: Sequence[FilterCriteria] | None = None,
    search_term: str | None = None,
) -> Select:
    """Restrict ``stmt`` to rows matching every criterion and the search term."""
    for criteria in filters or ():
        stmt = stmt.where(build_condition(table, criteria))

    search = build_search_condition(table, search_term)
    if search is not None:
        stmt = stmt.where(search)
    return stmt
