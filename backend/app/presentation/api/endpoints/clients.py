"""Client CRUD endpoints.

The router carries no prefix of its own; ``create_app`` mounts it under
``Settings.resource_prefix``. Bodies are read raw and decoded by the payload
codec so that malformed JSON surfaces as a ParseError, not a 422.
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.application.payload_codec import decode_fields
from app.application.schemas import ClientResponse
from app.application.services import ClientService
from app.config import get_settings
from app.infrastructure.dependencies import get_client_service

router = APIRouter(tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
@router.get("/", response_model=list[ClientResponse], include_in_schema=False)
async def list_clients(
    search: str | None = Query(None, description="Substring of name or surname"),
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """Retrieve all clients, optionally filtered by name/surname substring."""
    clients = await service.list_clients(search=search)
    return [ClientResponse.model_validate(c, from_attributes=True) for c in clients]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_client(
    request: Request,
    response: Response,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Create a new client; the Location header points at the new resource."""
    fields = decode_fields(await request.body())
    client = await service.create_client(fields)
    response.headers["Location"] = f"{get_settings().resource_prefix}/{client.id}"
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Retrieve a single client by ID."""
    client = await service.get_client(client_id)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    request: Request,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Replace a client's name, surname, lastName and contacts."""
    fields = decode_fields(await request.body())
    client = await service.update_client(client_id, fields)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}")
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> dict:
    """Delete a client by ID; absent ids are a no-op."""
    await service.delete_client(client_id)
    return {}
