"""
Offset pagination over a filtered, ordered Select.

Bounds are validated on construction; out-of-range values are a caller
error and are never clamped.
"""

from dataclasses import dataclass

from sqlalchemy import Select

from shared.config.constants import Limits
from shared.utils.exceptions import ValidationError


@dataclass(frozen=True)
class PageRequest:
    """
    Page selection.

    Attributes:
        page_number: 1-indexed page
        page_size: Items per page
    """

    page_number: int = Limits.DEFAULT_PAGE_NUMBER
    page_size: int = Limits.DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page_size < Limits.MIN_PAGE_SIZE:
            raise ValidationError("Page size invalid.", page_size=self.page_size)
        if self.page_number < Limits.MIN_PAGE_NUMBER:
            raise ValidationError("Page number invalid.", page_number=self.page_number)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    def apply(self, stmt: Select) -> Select:
        return stmt.offset(self.offset).limit(self.limit)
