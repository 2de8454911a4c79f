"""
Pagination dependency for list endpoints.

Usage:
    from rest_api.routers._common.pagination import get_page_request

    @router.get("")
    def list_items(page: PageRequest = Depends(get_page_request)):
        ...

Out-of-range values are rejected with 400 ("Page size invalid." /
"Page number invalid.") before the endpoint body runs.
"""

from fastapi import Query

from rest_api.services.query.pagination import PageRequest
from shared.config.constants import Limits


def get_page_request(
    page_number: int = Query(
        default=Limits.DEFAULT_PAGE_NUMBER,
        alias="pageNumber",
        description="1-indexed page to return",
    ),
    page_size: int = Query(
        default=Limits.DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description="Maximum number of items to return",
    ),
) -> PageRequest:
    """FastAPI dependency building a validated PageRequest."""
    return PageRequest(page_number=page_number, page_size=page_size)
