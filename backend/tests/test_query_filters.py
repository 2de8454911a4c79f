"""
Tests for the query filter engine against a real session.
"""

import uuid
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import select

from rest_api.models import Transaction
from rest_api.services.domain.transaction_service import TRANSACTION_FIELDS
from rest_api.services.query import FieldTable, FilterCriteria, apply_filters
from shared.utils.exceptions import FilterTypeError, ValidationError


def _references(db_session, filters=None, search_term=None, table=TRANSACTION_FIELDS):
    stmt = apply_filters(select(Transaction), table, filters, search_term)
    stmt = stmt.order_by(Transaction.reference)
    return [t.reference for t in db_session.scalars(stmt)]


def _criteria(prop, op, value):
    return FilterCriteria(property_name=prop, operator=op, value=value)


class TestComparisonOperators:
    """Equality and ordering operators."""

    def test_equal(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("status", "Equal", "settled")]) == ["B", "C"]

    def test_not_equal(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("status", "NotEqual", "settled")]) == ["A"]

    @pytest.mark.parametrize(
        "operator, value, expected",
        [
            ("GreaterThan", "10", ["B", "C"]),
            ("GreaterThanOrEqual", "20", ["B", "C"]),
            ("LessThan", "20", ["A"]),
            ("LessThanOrEqual", "20", ["A", "B"]),
        ],
    )
    def test_ordering_on_decimal(self, db_session, seed_transactions, operator, value, expected):
        assert _references(db_session, [_criteria("amount", operator, value)]) == expected

    def test_ordering_on_datetime(self, db_session, seed_transactions):
        filters = [_criteria("transaction_date", "GreaterThan", "2024-03-02T00:00:00")]
        assert _references(db_session, filters) == ["B", "C"]

    def test_criteria_are_conjunctive(self, db_session, seed_transactions):
        filters = [
            _criteria("amount", "GreaterThan", "10"),
            _criteria("amount", "LessThan", "30"),
            _criteria("status", "Equal", "settled"),
        ]
        assert _references(db_session, filters) == ["B"]

    def test_property_name_is_normalized(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("TransactionDate", "lt", "2024-03-02T00:00:00")]) == ["A"]


class TestNullComparisons:
    """Null values compare with IS NULL / IS NOT NULL."""

    @pytest.fixture
    def with_missing_description(self, db_session, seed_transactions):
        seed_transactions[0].description = None
        db_session.commit()
        return seed_transactions

    def test_equal_null(self, db_session, with_missing_description):
        assert _references(db_session, [_criteria("description", "Equal", None)]) == ["A"]

    def test_not_equal_null(self, db_session, with_missing_description):
        assert _references(db_session, [_criteria("description", "NotEqual", None)]) == ["B", "C"]

    def test_not_equal_value_includes_null_rows(self, db_session, with_missing_description):
        filters = [_criteria("description", "NotEqual", "Transaction B")]
        assert _references(db_session, filters) == ["A", "C"]

    def test_null_with_ordering_operator(self, db_session, seed_transactions):
        with pytest.raises(ValidationError):
            _references(db_session, [_criteria("amount", "GreaterThan", None)])


class TestTextOperators:
    """Contains / StartsWith / EndsWith."""

    def test_contains_is_case_insensitive(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("description", "Contains", "TRANSACTION b")]) == ["B"]

    def test_starts_with(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("status", "StartsWith", "sett")]) == ["B", "C"]

    def test_ends_with(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("description", "EndsWith", "c")]) == ["C"]

    def test_wildcards_are_literal(self, db_session, seed_transactions):
        assert _references(db_session, [_criteria("description", "Contains", "%")]) == []
        assert _references(db_session, [_criteria("description", "Contains", "_")]) == []

    def test_underscore_matches_literally(self, db_session):
        db_session.add(Transaction(
            id=uuid.uuid4(),
            reference="U",
            description="under_score",
            amount=Decimal("1"),
            currency="USD",
            transaction_date=datetime(2024, 1, 1),
        ))
        db_session.commit()
        assert _references(db_session, [_criteria("description", "Contains", "r_s")]) == ["U"]


class TestFilterErrors:
    """Invalid criteria are rejected with 400 errors."""

    def test_unknown_property(self, db_session, seed_transactions):
        with pytest.raises(ValidationError) as exc:
            _references(db_session, [_criteria("colour", "Equal", "red")])
        assert "colour" in exc.value.detail

    def test_unsupported_operator(self, db_session, seed_transactions):
        with pytest.raises(ValidationError):
            _references(db_session, [_criteria("amount", "Between", "1")])

    def test_unconvertible_value(self, db_session, seed_transactions):
        with pytest.raises(ValidationError) as exc:
            _references(db_session, [_criteria("amount", "Equal", "lots")])
        assert "lots" in exc.value.detail

    def test_text_operator_on_decimal_field(self, db_session, seed_transactions):
        with pytest.raises(FilterTypeError) as exc:
            _references(db_session, [_criteria("amount", "Contains", "1")])
        assert exc.value.status_code == 400
        assert "Contains" in exc.value.detail

    def test_ordering_operator_on_text_field(self, db_session, seed_transactions):
        with pytest.raises(FilterTypeError):
            _references(db_session, [_criteria("status", "GreaterThan", "a")])

    def test_filter_type_error_is_validation_error(self):
        assert issubclass(FilterTypeError, ValidationError)


class TestSearch:
    """Free-text search across searchable fields."""

    def test_search_matches_any_searchable_field(self, db_session, seed_transactions):
        assert _references(db_session, search_term="pending") == ["A"]
        assert _references(db_session, search_term="transaction c") == ["C"]

    def test_search_term_is_trimmed(self, db_session, seed_transactions):
        assert _references(db_session, search_term="  SETTLED  ") == ["B", "C"]

    def test_blank_search_term_matches_everything(self, db_session, seed_transactions):
        assert _references(db_session, search_term="   ") == ["A", "B", "C"]

    def test_search_is_anded_with_filters(self, db_session, seed_transactions):
        filters = [_criteria("amount", "GreaterThan", "20")]
        assert _references(db_session, filters, search_term="settled") == ["C"]

    def test_no_searchable_fields_matches_nothing(self, db_session, seed_transactions):
        unsearchable = FieldTable(
            "Transaction",
            [spec for spec in TRANSACTION_FIELDS if not spec.searchable],
        )
        assert _references(db_session, search_term="A", table=unsearchable) == []
        assert _references(db_session, search_term="", table=unsearchable) == ["A", "B", "C"]
