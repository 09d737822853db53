"""Route Dependencies — per-request construction of repository and service.

Invariants:
    - One AsyncSession per request (get_db), one repository and service on top of it
    - Overridable via app.dependency_overrides in tests
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repository_protocols import ClientRepository
from app.infrastructure.client_repository import SqlClientRepository
from app.infrastructure.database import get_db
from app.services.clients_service import ClientsService


def get_client_repository(
    db: AsyncSession = Depends(get_db),
) -> ClientRepository:
    return SqlClientRepository(db)


def get_clients_service(
    repository: ClientRepository = Depends(get_client_repository),
) -> ClientsService:
    return ClientsService(repository)
