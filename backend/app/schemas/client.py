"""Client Schemas — API-facing projections of the Client resource.

Invariants:
    - ClientDto.created_at is an ISO-8601 string, never a datetime
    - ClientDto.name is explicitly nullable (serialized as null, not omitted)
    - LinkDto.title resolves to the client's name, else its email (controller rule)
"""

from app.schemas.base import CamelModel


class ClientDto(CamelModel):
    """Client resource as returned to API consumers."""
    id: str
    created_at: str
    name: str | None = None
    email: str


class LinkDto(CamelModel):
    """Hypermedia link descriptor used in list responses."""
    href: str
    rel: str | None = None
    title: str | None = None
