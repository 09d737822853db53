"""Clients Service — business rules for reading Client resources.

Invariants:
    - Malformed ids are rejected with BadRequestError before the repository is touched
    - A None from the repository becomes NotFoundError; repository never raises for absence
    - Repository/mapping errors propagate unchanged; no retries
    - Returns DTOs only; entities never leave the service

Design Decisions:
    - Repository injected via constructor (ClientRepository protocol): routes build it
      per request from the session, tests pass a fake
"""

import logging

from app.core.client_mapper import to_client_dto, to_client_dtos
from app.core.errors import BadRequestError, NotFoundError
from app.core.repository_protocols import ClientRepository
from app.core.validation import is_valid_object_id
from app.schemas.client import ClientDto

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = (
    "Invalid client ID format. ID must be 24 hexadecimal characters."
)
CLIENT_NOT_FOUND_MESSAGE = "Client not found"


class ClientsService:
    """Orchestrates validation → repository → not-found translation → mapping."""

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def list_clients(self) -> list[ClientDto]:
        """All clients as DTOs; an empty store yields an empty list."""
        clients = await self._repository.find_all()
        return to_client_dtos(clients)

    async def get_client_by_id(self, client_id: str) -> ClientDto:
        """Single client as DTO.

        Raises:
            BadRequestError: client_id is not 24 hexadecimal characters.
            NotFoundError: no client with that id.
        """
        if not is_valid_object_id(client_id):
            raise BadRequestError(INVALID_ID_MESSAGE)
        client = await self._repository.find_by_id(client_id)
        if client is None:
            logger.debug(f"Client {client_id} not found")
            raise NotFoundError(CLIENT_NOT_FOUND_MESSAGE)
        return to_client_dto(client)
