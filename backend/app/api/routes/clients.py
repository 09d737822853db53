"""Client Routes — read-only HTTP surface for Client resources.

Invariants:
    - GET /clients always answers 200 with a link list (title "All clients", count = N)
    - GET /clients/{client_id} answers 200 with a ClientDto (title "Client by id")
    - Routes never catch service errors: they propagate to the global error handlers

Design Decisions:
    - List returns hypermedia links rather than full DTOs; link title is name, else email
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.dependencies import get_clients_service
from app.api.envelope import ok, resource_url
from app.schemas.client import ClientDto, LinkDto
from app.services.clients_service import ClientsService

router = APIRouter(prefix="/clients", tags=["clients"])


def to_link(request: Request, client: ClientDto) -> LinkDto:
    return LinkDto(
        href=resource_url(request, f"/clients/{client.id}"),
        rel="client",
        title=client.name if client.name is not None else client.email,
    )


@router.get("")
async def get_clients(
    request: Request,
    service: ClientsService = Depends(get_clients_service),
):
    """List hyperlinks to every client resource."""
    clients = await service.list_clients()
    links = [to_link(request, c) for c in clients]
    response = ok(request, links, title="All clients", count=len(clients))
    return JSONResponse(status_code=200, content=response.to_content())


@router.get("/{client_id}")
async def get_client(
    client_id: str,
    request: Request,
    service: ClientsService = Depends(get_clients_service),
):
    """Single client resource."""
    client = await service.get_client_by_id(client_id)
    response = ok(request, client, title="Client by id")
    return JSONResponse(status_code=200, content=response.to_content())
