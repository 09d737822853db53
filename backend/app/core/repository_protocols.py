"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      while the mapper and validator that consume their results stay pure
"""

from datetime import datetime
from typing import Protocol


class ClientLike(Protocol):
    """Structural contract for Client entities handed out by a repository.

    Mapper tolerates missing/None id and created_at, so fakes and
    not-yet-persisted ORM objects satisfy it as well.
    """
    id: str | None
    created_at: datetime | None
    name: str | None
    email: str


class ClientRepository(Protocol):
    """Contract for client data access — implemented by shell.

    A missing record is a normal result (None), never an exception.
    """
    async def find_all(self) -> list[ClientLike]: ...
    async def find_by_id(self, client_id: str) -> ClientLike | None: ...
