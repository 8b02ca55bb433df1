from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from src.database import get_db
from src.clients.schemas import ClientCreate, ClientUpdate, ClientResponse
from src.clients.service import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    client: ClientCreate,
    db: AsyncSession = Depends(get_db),
):
    service = ClientService(db)
    return await service.create_client(client)


@router.get("", response_model=List[ClientResponse])
async def list_clients(
    skip: int = 0,
    limit: int = 100,
    db: AsyncSession = Depends(get_db),
):
    service = ClientService(db)
    return await service.list_clients(skip, limit)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ClientService(db)
    return await service.get_client(client_id)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    client: ClientUpdate,
    db: AsyncSession = Depends(get_db),
):
    service = ClientService(db)
    return await service.update_client(client_id, client)


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
):
    service = ClientService(db)
    await service.delete_client(client_id)
    return Response(status_code=204)
