"""
Request correlation for the pricing API.

Every request carries an ``X-Request-ID``. A caller-supplied id is reused
when it is a short token of letters, digits, ``.``, ``_`` or ``-``; anything
else is replaced by a fresh UUID. The id is echoed on the response (CORS
exposes it), and CorrelationIdFilter stamps it on every log record, so the
"Entity created/updated/patched/deleted" lines of the CRUD services and the
warnings that AppException logs for 4xx/5xx answers can be traced back to
the request that caused them.
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Request id of the request being served, or "" outside a request."""
    return request_id_var.get()


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a well-formed caller id, otherwise mint a new one."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the request id for the duration of the request and echoes it."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)
        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """Stamps ``record.request_id`` ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
