"""Envelope Schemas — the uniform {meta, data} wrapper for every response.

Invariants:
    - Top-level keys are exactly "meta" and "data", for success and error alike
    - meta.status equals the HTTP status actually sent
    - Optional meta fields are omitted from JSON when unset
    - data is None only for no-content and error responses

Design Decisions:
    - to_content() renders meta with exclude_none but data as-is, so a DTO's
      explicit null (e.g. ClientDto.name) survives serialization
"""

from typing import Any, Generic, TypeVar

from fastapi.encoders import jsonable_encoder

from app.schemas.base import CamelModel

T = TypeVar("T")


class Meta(CamelModel):
    """Response metadata. status/path/method/timestamp/request_id are builder-controlled."""
    status: int
    path: str
    method: str
    timestamp: str
    request_id: str | None = None
    title: str | None = None
    count: int | None = None
    page: int | None = None
    per_page: int | None = None
    total: int | None = None


class ApiResponse(CamelModel, Generic[T]):
    meta: Meta
    data: T | None = None

    def to_content(self) -> dict[str, Any]:
        """JSON-ready body for JSONResponse."""
        return {
            "meta": self.meta.model_dump(by_alias=True, exclude_none=True),
            "data": jsonable_encoder(self.data, by_alias=True),
        }
