"""Envelope Builder — constructs ApiResponse meta/data from the current request.

Invariants:
    - status, path, method, timestamp and request_id are always computed here
    - Extras (title, count, paging) are keyword-only and can only add optional fields
    - request_id is read from the x-request-id header; never generated here
    - Side-effect free apart from reading the wall clock
"""

from typing import TypeVar

from fastapi import Request

from app.core.iso_time import utc_now_iso8601
from app.schemas.envelope import ApiResponse, Meta

REQUEST_ID_HEADER = "x-request-id"

T = TypeVar("T")


def request_path(request: Request) -> str:
    """Path as requested, including the query string when present."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def build_meta(
    request: Request,
    status: int,
    *,
    title: str | None = None,
    count: int | None = None,
    page: int | None = None,
    per_page: int | None = None,
    total: int | None = None,
) -> Meta:
    return Meta(
        status=status,
        path=request_path(request),
        method=request.method,
        timestamp=utc_now_iso8601(),
        request_id=request.headers.get(REQUEST_ID_HEADER),
        title=title,
        count=count,
        page=page,
        per_page=per_page,
        total=total,
    )


def ok(request: Request, data: T, **extras) -> ApiResponse[T]:
    """200 OK envelope."""
    return ApiResponse(meta=build_meta(request, 200, **extras), data=data)


def created(request: Request, data: T, **extras) -> ApiResponse[T]:
    """201 Created envelope."""
    return ApiResponse(meta=build_meta(request, 201, **extras), data=data)


def no_content(request: Request, **extras) -> ApiResponse[None]:
    """204 No Content envelope; data is always None."""
    return ApiResponse(meta=build_meta(request, 204, **extras), data=None)


def resource_url(request: Request, path: str) -> str:
    """Absolute URL for a resource path, based on the incoming request's scheme and host."""
    base = str(request.base_url).rstrip("/")
    if path.startswith("/"):
        return f"{base}{path}"
    return f"{base}/{path}"
