import logging
from typing import List
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException

from src.clients.models import Client
from src.clients.schemas import ClientCreate, ClientUpdate
from src.core.errors import not_found, validation_error
from src.projects.models import Project

logger = logging.getLogger(__name__)

class ClientService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_client(self, client_in: ClientCreate) -> Client:
        db_client = Client(**client_in.model_dump())
        self.db.add(db_client)
        await self.db.commit()
        await self.db.refresh(db_client)
        logger.info(f"Client {db_client.id} created")
        return db_client

    async def list_clients(self, skip: int = 0, limit: int = 100) -> List[Client]:
        query = select(Client).order_by(Client.id).offset(skip).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_client(self, client_id: int) -> Client:
        client = await self.db.get(Client, client_id)
        if not client:
            raise not_found("Client")
        return client

    async def update_client(self, client_id: int, client_in: ClientUpdate) -> Client:
        client = await self.get_client(client_id)

        update_data = client_in.model_dump(exclude_unset=True)
        for field in ("name", "email"):
            if field in update_data and update_data[field] is None:
                raise validation_error("Invalid client data", field, "Field cannot be null")

        for field, value in update_data.items():
            setattr(client, field, value)

        await self.db.commit()
        await self.db.refresh(client)
        return client

    async def delete_client(self, client_id: int) -> None:
        client = await self.get_client(client_id)

        # Projects must not be orphaned
        dependents = await self.db.scalar(
            select(func.count()).select_from(Project).where(Project.client_id == client_id)
        )
        if dependents:
            raise HTTPException(
                status_code=409,
                detail=f"Client has dependent projects ({dependents}); delete or reassign them first",
            )

        await self.db.delete(client)
        await self.db.commit()
        logger.info(f"Client {client_id} deleted")
