"""Client Repository — SQLAlchemy implementation of the ClientRepository protocol.

Invariants:
    - Only component that queries the clients table
    - No validation, no error translation: a missing row returns None
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.client import Client


class SqlClientRepository:
    """Read access to Client rows through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[Client]:
        result = await self._db.execute(
            select(Client).order_by(Client.created_at),
        )
        return list(result.scalars().all())

    async def find_by_id(self, client_id: str) -> Client | None:
        return await self._db.get(Client, client_id)
