"""
Utilities module: Exceptions, validators.
"""

from shared.utils.exceptions import (
    AppException,
    ValidationError,
    FilterTypeError,
    AuthorizationError,
    NotFoundError,
    InternalError,
    DatabaseError,
)
from shared.utils.validators import (
    escape_like_pattern,
    normalize_field_name,
)

__all__ = [
    # exceptions
    "AppException",
    "ValidationError",
    "FilterTypeError",
    "AuthorizationError",
    "NotFoundError",
    "InternalError",
    "DatabaseError",
    # validators
    "escape_like_pattern",
    "normalize_field_name",
]
