"""
Authentication and authorization utilities.

Staff clients present HS256 bearer JWTs. The ``entitlements`` claim maps
resource names to the entitlements granted on them:

    {"sub": "42", "entitlements": {"PriceList": ["Read", "Update"], "*": ["Read"]}}

The ``"*"`` resource key grants its entitlements on every resource.
"""

from __future__ import annotations

import time
import uuid
from typing import Any, Callable

import jwt
from fastapi import Depends, Header

from shared.config.constants import ANY_RESOURCE, Entitlement
from shared.config.logging import security_logger as logger
from shared.config.settings import settings
from shared.utils.exceptions import AuthorizationError


# =============================================================================
# JWT Functions
# =============================================================================


def sign_jwt(
    payload: dict[str, Any],
    ttl_seconds: int | None = None,
) -> str:
    """
    Sign a JWT token with the given payload.

    Args:
        payload: Claims to include in the token (sub, entitlements, ...)
        ttl_seconds: Token lifetime in seconds. Defaults to access token expiry.

    Returns:
        Signed JWT token string.
    """
    if ttl_seconds is None:
        ttl_seconds = settings.jwt_access_token_expire_minutes * 60

    now = int(time.time())
    data = {
        **payload,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + ttl_seconds,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(data, settings.jwt_secret, algorithm="HS256")


def verify_jwt(token: str) -> dict[str, Any]:
    """
    Verify and decode a JWT token.

    Returns:
        Decoded token claims.

    Raises:
        AuthorizationError: If token is invalid, expired or lacks a subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=["HS256"],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except jwt.ExpiredSignatureError:
        raise AuthorizationError("Token has expired")
    except jwt.InvalidTokenError as e:
        # Log the actual error, return a generic message to the client
        logger.warning("JWT validation failed", error=str(e))
        raise AuthorizationError("Invalid token")

    if "sub" not in payload:
        raise AuthorizationError("Invalid token: missing subject claim")

    entitlements = payload.get("entitlements", {})
    if not isinstance(entitlements, dict):
        raise AuthorizationError("Invalid token: malformed entitlements claim")

    return payload


def get_bearer_token(authorization: str | None) -> str:
    """
    Extract bearer token from Authorization header.

    Raises:
        AuthorizationError: If header is missing or malformed.
    """
    if not authorization:
        raise AuthorizationError("Missing Authorization header")
    if not authorization.startswith("Bearer "):
        raise AuthorizationError(
            "Invalid Authorization header format. Expected: Bearer <token>"
        )
    return authorization.split(" ", 1)[1].strip()


def current_user_context(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> dict[str, Any]:
    """
    FastAPI dependency to get the current user context from JWT.

    Returns:
        Dict with: sub (user id), entitlements and the registered claims.
    """
    token = get_bearer_token(authorization)
    return verify_jwt(token)


# =============================================================================
# Entitlements
# =============================================================================


def has_entitlement(ctx: dict[str, Any], resource: str, entitlement: Entitlement) -> bool:
    """Check whether the user context grants ``entitlement`` on ``resource``."""
    granted = ctx.get("entitlements") or {}
    wanted = entitlement.value.lower()

    for key in (resource, ANY_RESOURCE):
        values = granted.get(key) or []
        if isinstance(values, str):
            values = [values]
        if any(str(v).lower() == wanted for v in values):
            return True
    return False


def require_entitlement(resource: str, entitlement: Entitlement) -> Callable[..., dict[str, Any]]:
    """
    Build a FastAPI dependency that requires ``entitlement`` on ``resource``.

    Usage:
        @router.get("/", dependencies=[Depends(require_entitlement("PriceList", Entitlement.READ))])
        def list_price_lists(...):
            ...
    """

    def dependency(ctx: dict[str, Any] = Depends(current_user_context)) -> dict[str, Any]:
        if not has_entitlement(ctx, resource, entitlement):
            raise AuthorizationError(
                f"Missing entitlement {entitlement.value} on {resource}",
                user_id=ctx.get("sub"),
                resource=resource,
                entitlement=entitlement.value,
            )
        return ctx

    dependency.__name__ = f"require_{resource.lower()}_{entitlement.value.lower()}"
    return dependency
