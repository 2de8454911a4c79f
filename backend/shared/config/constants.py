"""
Application-wide constants: entitlements, resource names, limits.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Authorization
# =============================================================================


class Entitlement(str, Enum):
    """Permission scoped to a resource name."""

    CREATE = "Create"
    READ = "Read"
    UPDATE = "Update"
    DELETE = "Delete"


# Resource key in the entitlements claim that grants on every resource
ANY_RESOURCE: Final[str] = "*"


class Resources:
    """Resource names used for entitlement checks."""

    PRICE_LIST: Final[str] = "PriceList"
    PRICE_LIST_VERSION_COMPONENT: Final[str] = "PriceListVersionComponent"
    TRANSACTION: Final[str] = "Transaction"

    ALL: Final[tuple[str, ...]] = (PRICE_LIST, PRICE_LIST_VERSION_COMPONENT, TRANSACTION)


# =============================================================================
# Query
# =============================================================================


class SortOrder(str, Enum):
    """Sort direction tokens accepted by list endpoints."""

    ASC = "asc"
    DESC = "desc"


class Limits:
    """Validation limits."""

    # Pagination defaults
    DEFAULT_PAGE_NUMBER: Final[int] = 1
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MIN_PAGE_NUMBER: Final[int] = 1
    MIN_PAGE_SIZE: Final[int] = 1

    # String lengths
    MAX_NAME_LENGTH: Final[int] = 200
    MAX_CODE_LENGTH: Final[int] = 50
    MAX_DESCRIPTION_LENGTH: Final[int] = 2000
    CURRENCY_CODE_LENGTH: Final[int] = 3
