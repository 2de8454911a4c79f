"""
CRUD Services - Generic operations for entity management.

Provides:
- CRUDConfig / CRUDService: per-entity create, read, update, patch, delete
- PatchOperation and typed patch actions (SetField, ClearField)
"""

from .patch import ClearField, PatchAction, PatchOperation, SetField, apply_patch, resolve_patch
from .service import CRUDConfig, CRUDService

__all__ = [
    "CRUDConfig",
    "CRUDService",
    "PatchOperation",
    "PatchAction",
    "SetField",
    "ClearField",
    "resolve_patch",
    "apply_patch",
]
