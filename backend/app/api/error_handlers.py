"""Error Handlers — global exception handlers producing the failure envelope.

Invariants:
    - Every error becomes {meta, data: null}, meta.title = message, meta.status = HTTP status
    - Status resolution: typed ClientsApiError → integer `cause` attribute → 500
    - Empty messages fall back to "Something went wrong"
    - Failure envelopes are built with the same build_meta used by success paths

Design Decisions:
    - Three registered handlers: domain (ClientsApiError), routing (Starlette HTTPException),
      validation (RequestValidationError); untyped errors are rendered by
      UnhandledErrorMiddleware through error_response()
    - Unmatched routes report "Resource not found" regardless of Starlette's detail text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.envelope import build_meta
from app.core.errors import (
    ClientsApiError, NotFoundError, resolve_message, resolve_status,
)
from app.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)


def error_envelope(request: Request, status_code: int, message: str) -> JSONResponse:
    """Failure envelope with data=null."""
    meta = build_meta(request, status_code, title=message)
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(meta=meta, data=None).to_content(),
    )


def error_response(request: Request, exc: BaseException) -> JSONResponse:
    """Resolve status/message of any exception and render the failure envelope."""
    return error_envelope(request, resolve_status(exc), resolve_message(exc))


def _register_api_error_handler(app: FastAPI) -> None:
    """Register typed application error handler."""

    @app.exception_handler(ClientsApiError)
    async def api_error_handler(request: Request, exc: ClientsApiError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
            },
        )
        return error_response(request, exc)


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register routing error handler (unmatched path, method not allowed)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = NotFoundError.default_message
        else:
            message = str(exc.detail)
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {message}",
            extra={"path": request.url.path},
        )
        response = error_envelope(request, exc.status_code, message)
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_envelope(
            request, status.HTTP_400_BAD_REQUEST, _validation_message(exc),
        )


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten field-level validation errors into one message."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request data ({details})" if details else "Invalid request data"
