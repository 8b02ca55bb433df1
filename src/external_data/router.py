from typing import List
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dependencies import verify_api_key
from src.database import get_db
from src.external_data.schemas import ExternalDataResponse, WebhookAccepted, WebhookPayload
from src.external_data.service import ExternalDataService

webhook_router = APIRouter(prefix="/webhook", tags=["webhook"])
router = APIRouter(prefix="/external-data", tags=["external-data"])


@webhook_router.post("/data", response_model=WebhookAccepted, status_code=201)
async def receive_data(
    payload: WebhookPayload,
    source: str = Depends(verify_api_key),
    db: AsyncSession = Depends(get_db),
):
    """Entry point for integrations; authenticated with the X-API-Key header."""
    service = ExternalDataService(db)
    item = await service.ingest(payload, source)
    return {"message": "Data received successfully", "data_id": item.id}


@router.get("", response_model=List[ExternalDataResponse])
async def list_external_data(db: AsyncSession = Depends(get_db)):
    service = ExternalDataService(db)
    return await service.list_items()


@router.get("/unprocessed", response_model=List[ExternalDataResponse])
async def list_unprocessed_external_data(db: AsyncSession = Depends(get_db)):
    service = ExternalDataService(db)
    return await service.list_items(unprocessed_only=True)


@router.get("/{item_id}", response_model=ExternalDataResponse)
async def get_external_data(item_id: int, db: AsyncSession = Depends(get_db)):
    service = ExternalDataService(db)
    return await service.get_item(item_id)


@router.patch("/{item_id}/process")
async def process_external_data(item_id: int, db: AsyncSession = Depends(get_db)):
    service = ExternalDataService(db)
    await service.mark_processed(item_id)
    return {"message": "External data marked as processed"}


@router.delete("/{item_id}", status_code=204)
async def delete_external_data(item_id: int, db: AsyncSession = Depends(get_db)):
    service = ExternalDataService(db)
    await service.delete_item(item_id)
    return Response(status_code=204)
