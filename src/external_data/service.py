import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import not_found
from src.external_data.models import ExternalData
from src.external_data.schemas import WebhookPayload

logger = logging.getLogger(__name__)


class ExternalDataService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def ingest(self, payload: WebhookPayload, source: str) -> ExternalData:
        item = ExternalData(
            source=source,
            data_type=payload.type,
            content=payload.model_dump(mode="json"),
            processed=False,
        )
        self.db.add(item)
        await self.db.commit()
        await self.db.refresh(item)
        logger.info(f"Stored {payload.type} payload {item.id} from {source}")
        return item

    async def list_items(self, unprocessed_only: bool = False) -> List[ExternalData]:
        query = select(ExternalData).order_by(ExternalData.id)
        if unprocessed_only:
            query = query.where(ExternalData.processed.is_(False))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_item(self, item_id: int) -> ExternalData:
        item = await self.db.get(ExternalData, item_id)
        if not item:
            raise not_found("External data")
        return item

    async def mark_processed(self, item_id: int) -> ExternalData:
        # One-way flag: there is no way back to unprocessed
        item = await self.get_item(item_id)
        if not item.processed:
            item.processed = True
            await self.db.commit()
            await self.db.refresh(item)
        return item

    async def delete_item(self, item_id: int) -> None:
        item = await self.get_item(item_id)
        await self.db.delete(item)
        await self.db.commit()
