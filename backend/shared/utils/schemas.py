"""
Shared Pydantic schemas used across the application.
"""

from uuid import UUID

from pydantic import BaseModel


# =============================================================================
# Operation Results
# =============================================================================


class CreatedResponse(BaseModel):
    """Identifier assigned to a newly created entity."""

    id: UUID


class StatusResponse(BaseModel):
    """Outcome flag of an update, patch or delete."""

    status: bool


class ErrorResponse(BaseModel):
    """Standard error body."""

    detail: str | list | dict
