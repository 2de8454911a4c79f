"""
Security module: token verification and entitlement checks.
"""

from shared.security.auth import (
    sign_jwt,
    verify_jwt,
    current_user_context,
    has_entitlement,
    require_entitlement,
)

__all__ = [
    "sign_jwt",
    "verify_jwt",
    "current_user_context",
    "has_entitlement",
    "require_entitlement",
]
