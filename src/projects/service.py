import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.clients.models import Client
from src.core.errors import not_found, validation_error
from src.documents.generator import format_date
from src.documents.models import Document
from src.projects.lifecycle import (
    LabelMode,
    check_invoice_gate,
    derive_labels,
    sort_by_urgency,
)
from src.projects.models import Project
from src.projects.schemas import ProjectCreate, ProjectUpdate
from src.resumes.models import Resume
from src.shared.models import utcnow

logger = logging.getLogger(__name__)

# Columns a PATCH may omit but never null out
NON_NULLABLE_FIELDS = {
    "client_id": "clientId",
    "name": "name",
    "status": "status",
    "invoice_sent": "invoiceSent",
    "is_paid": "isPaid",
    "is_archived": "isArchived",
}


class ProjectService:
    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def with_labels(project: Project, mode: LabelMode, now: Optional[datetime] = None) -> Dict[str, Any]:
        return {**project.__dict__, "labels": derive_labels(project, now or utcnow(), mode)}

    async def _require_client(self, client_id: int, message: str) -> None:
        if await self.db.get(Client, client_id) is None:
            raise validation_error(message, "clientId", "Client not found")

    async def list_projects(
        self,
        client_id: Optional[int] = None,
        sort: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        now = now or utcnow()
        query = select(Project).order_by(Project.id)
        if client_id is not None:
            query = query.where(Project.client_id == client_id)
        result = await self.db.execute(query)
        projects = list(result.scalars().all())

        if sort == "urgency":
            projects = sort_by_urgency(projects, now)
        return [self.with_labels(p, LabelMode.EXCLUSIVE, now) for p in projects]

    async def get_project(self, project_id: int) -> Project:
        project = await self.db.get(Project, project_id)
        if not project:
            raise not_found("Project")
        return project

    async def get_project_detail(self, project_id: int) -> Dict[str, Any]:
        project = await self.get_project(project_id)
        return self.with_labels(project, LabelMode.ACCUMULATING)

    async def create_project(self, project_in: ProjectCreate) -> Dict[str, Any]:
        await self._require_client(project_in.client_id, "Invalid project data")
        check_invoice_gate(project_in.status, project_in.invoice_sent, "Invalid project data")

        project = Project(**project_in.model_dump())
        self.db.add(project)
        await self.db.commit()
        await self.db.refresh(project)
        logger.info(f"Project {project.id} created for client {project.client_id}")
        return self.with_labels(project, LabelMode.ACCUMULATING)

    async def update_project(self, project_id: int, project_in: ProjectUpdate) -> Dict[str, Any]:
        project = await self.get_project(project_id)
        update_data = project_in.model_dump(exclude_unset=True)

        # Validate the whole patch before touching the row
        for field, wire_name in NON_NULLABLE_FIELDS.items():
            if field in update_data and update_data[field] is None:
                raise validation_error("Invalid project update", wire_name, "Field cannot be null")

        if "client_id" in update_data and update_data["client_id"] != project.client_id:
            await self._require_client(update_data["client_id"], "Invalid project update")

        check_invoice_gate(
            update_data.get("status", project.status),
            update_data.get("invoice_sent", project.invoice_sent),
            "Invalid project update",
        )

        for field, value in update_data.items():
            setattr(project, field, value)

        await self.db.commit()
        await self.db.refresh(project)
        logger.info(f"Project {project_id} updated: {sorted(update_data)}")
        return self.with_labels(project, LabelMode.ACCUMULATING)

    async def delete_project(self, project_id: int) -> None:
        project = await self.get_project(project_id)

        # Generated documents and resumes outlive the project
        await self.db.execute(
            update(Document).where(Document.project_id == project_id).values(project_id=None)
        )
        await self.db.execute(
            update(Resume).where(Resume.project_id == project_id).values(project_id=None)
        )
        await self.db.delete(project)
        await self.db.commit()
        logger.info(f"Project {project_id} deleted")

    async def get_mind_map(self, project_id: int) -> Dict[str, Any]:
        """Starting skeleton for the collaborative mind map of a project."""
        project = await self.get_project(project_id)
        deadline = f"Deadline: {format_date(project.deadline)}" if project.deadline else "No deadline"
        return {
            "nodes": [
                {
                    "id": "project",
                    "type": "custom",
                    "data": {"label": project.name, "description": project.description or "Project root node"},
                    "position": {"x": 250, "y": 50},
                },
                {
                    "id": "deliverables",
                    "type": "custom",
                    "data": {"label": "Deliverables", "description": "Project deliverables"},
                    "position": {"x": 100, "y": 200},
                },
                {
                    "id": "timeline",
                    "type": "custom",
                    "data": {"label": "Timeline", "description": deadline},
                    "position": {"x": 400, "y": 200},
                },
            ],
            "edges": [
                {"id": "e-project-deliverables", "source": "project", "target": "deliverables", "type": "default"},
                {"id": "e-project-timeline", "source": "project", "target": "timeline", "type": "default"},
            ],
        }

    async def save_mind_map(self, project_id: int, nodes: list, edges: list) -> Dict[str, Any]:
        # Mind maps are not stored yet; edits only live in the realtime rooms
        await self.get_project(project_id)
        logger.info(f"Mind map for project {project_id} received: {len(nodes)} nodes, {len(edges)} edges")
        return {"message": "Mind map saved successfully", "project_id": project_id}
