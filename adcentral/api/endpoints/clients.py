"""
Client management endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from adcentral.api.dependencies import get_client_service
from adcentral.enums.status import ClientStatus
from adcentral.services.client_service import ClientService
from adcentral.models.client_schema import ClientCreate, ClientUpdate, ClientResponse, ClientOption

router = APIRouter()

@router.get("/", response_model=List[ClientResponse])
async def get_clients(
    search: Optional[str] = None,
    client_status: Optional[ClientStatus] = Query(None, alias="status"),
    client_service: ClientService = Depends(get_client_service)
):
    """Get clients, newest first"""
    return client_service.get_clients(
        search=search,
        status=client_status.value if client_status else None
    )

@router.get("/selectable", response_model=List[ClientOption])
async def get_selectable_clients(
    client_service: ClientService = Depends(get_client_service)
):
    """Active clients ordered by name"""
    return client_service.get_selectable_clients()

@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    client_service: ClientService = Depends(get_client_service)
):
    """Get client by ID"""
    client = client_service.get_client(client_id)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client

@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreate,
    client_service: ClientService = Depends(get_client_service)
):
    """Create a new client"""
    return client_service.create_client(client_data)

@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    client_data: ClientUpdate,
    client_service: ClientService = Depends(get_client_service)
):
    """Update client by ID"""
    client = client_service.update_client(client_id, client_data)
    if not client:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
    return client

@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    client_service: ClientService = Depends(get_client_service)
):
    """Delete client by ID"""
    success = client_service.delete_client(client_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Client not found"
        )
