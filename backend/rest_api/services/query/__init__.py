"""
Query pipeline: filter criteria, field tables, filtering, sorting, pagination.
"""

from .criteria import FilterCriteria, FilterOperator, parse_filters
from .fields import FieldSpec, FieldTable
from .filters import apply_filters, build_condition, build_search_condition
from .pagination import PageRequest
from .sorting import apply_sort, parse_sort_order

__all__ = [
    "FilterCriteria",
    "FilterOperator",
    "parse_filters",
    "FieldSpec",
    "FieldTable",
    "apply_filters",
    "build_condition",
    "build_search_condition",
    "PageRequest",
    "apply_sort",
    "parse_sort_order",
]
