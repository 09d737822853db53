"""HTTP Middleware — request correlation id and terminal rendering of untyped errors.

Invariants:
    - Exactly one request id per request: inbound x-request-id, else a fresh uuid4
    - The id is written into the request scope headers (downstream reads it from there)
      and onto the response header
    - Any exception not handled by a registered exception handler becomes one
      {meta, data: null} envelope; nothing propagates to the server

Design Decisions:
    - UnhandledErrorMiddleware instead of @app.exception_handler(Exception): Starlette
      routes Exception handlers to ServerErrorMiddleware, which sits outside user
      middleware (no request id on the response) and re-raises after responding
    - Registration order in main.py: UnhandledErrorMiddleware first (inner),
      RequestIdMiddleware last (outer), so error envelopes also get the header
"""

import logging
import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.envelope import REQUEST_ID_HEADER
from app.api.error_handlers import error_response

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Ensure every request carries a correlation id, and echo it on the response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        _set_request_header(request, REQUEST_ID_HEADER, request_id)
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Render exceptions that escaped every exception handler."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc!r}",
                exc_info=True,
                extra={"path": request.url.path},
            )
            return error_response(request, exc)


def _set_request_header(request: Request, name: str, value: str) -> None:
    """Replace a header in the ASGI scope so downstream Request objects see it."""
    raw_name = name.lower().encode("latin-1")
    headers = [(k, v) for k, v in request.scope["headers"] if k.lower() != raw_name]
    headers.append((raw_name, value.encode("latin-1")))
    request.scope["headers"] = headers
    # Request caches parsed headers on first access
    request.__dict__.pop("_headers", None)
