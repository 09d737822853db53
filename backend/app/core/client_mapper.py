"""Client Mapper — pure projection of Client entities onto API DTOs.

Invariants:
    - Never raises for incomplete entities: missing id → "", missing created_at → epoch,
      missing name → None
    - Plural form preserves input order
"""

from collections.abc import Iterable

from app.core.iso_time import EPOCH, to_iso8601
from app.core.repository_protocols import ClientLike
from app.schemas.client import ClientDto


def to_client_dto(client: ClientLike) -> ClientDto:
    client_id = getattr(client, "id", None)
    created_at = getattr(client, "created_at", None)
    return ClientDto(
        id="" if client_id is None else str(client_id),
        created_at=to_iso8601(created_at or EPOCH),
        name=getattr(client, "name", None),
        email=getattr(client, "email", None) or "",
    )


def to_client_dtos(clients: Iterable[ClientLike]) -> list[ClientDto]:
    return [to_client_dto(c) for c in clients]
