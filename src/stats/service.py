from typing import Dict, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.clients.models import Client
from src.documents.models import Document
from src.projects.lifecycle import ProjectStatus
from src.projects.models import Project


class StatsService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, query) -> int:
        return (await self.db.scalar(query)) or 0

    async def dashboard_stats(self) -> Dict[str, Union[int, float]]:
        """Headline numbers for the dashboard, computed over the current store."""
        active_clients = await self._count(select(func.count()).select_from(Client))
        ongoing_projects = await self._count(
            select(func.count()).select_from(Project).where(Project.status == ProjectStatus.IN_PROGRESS)
        )
        revenue = await self.db.scalar(
            select(func.coalesce(func.sum(Project.amount), 0.0)).where(Project.status == ProjectStatus.PAID)
        )
        documents_generated = await self._count(select(func.count()).select_from(Document))

        return {
            "active_clients": active_clients,
            "ongoing_projects": ongoing_projects,
            "monthly_revenue": float(revenue or 0.0),
            "documents_generated": documents_generated,
        }
