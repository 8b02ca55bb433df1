from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.errors import not_found, validation_error
from src.projects.models import Project
from src.resumes.models import Resume, ResumeType
from src.resumes.schemas import ResumeCreate, ResumeUpdate


class ResumeService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _require_project(self, project_id: Optional[int], message: str) -> None:
        if project_id is not None and await self.db.get(Project, project_id) is None:
            raise validation_error(message, "projectId", "Project not found")

    async def list_resumes(self, resume_type: Optional[ResumeType] = None) -> List[Resume]:
        query = select(Resume).order_by(Resume.id)
        if resume_type is not None:
            query = query.where(Resume.type == resume_type)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_resume(self, resume_id: int) -> Resume:
        resume = await self.db.get(Resume, resume_id)
        if not resume:
            raise not_found("Resume")
        return resume

    async def create_resume(self, resume_in: ResumeCreate) -> Resume:
        await self._require_project(resume_in.project_id, "Invalid resume data")
        resume = Resume(**resume_in.model_dump())
        self.db.add(resume)
        await self.db.commit()
        await self.db.refresh(resume)
        return resume

    async def update_resume(self, resume_id: int, resume_in: ResumeUpdate) -> Resume:
        resume = await self.get_resume(resume_id)
        update_data = resume_in.model_dump(exclude_unset=True)

        for field in ("name", "type", "content"):
            if field in update_data and update_data[field] is None:
                raise validation_error("Invalid resume data", field, "Field cannot be null")
        if "project_id" in update_data:
            await self._require_project(update_data["project_id"], "Invalid resume data")

        for field, value in update_data.items():
            setattr(resume, field, value)

        await self.db.commit()
        await self.db.refresh(resume)
        return resume

    async def delete_resume(self, resume_id: int) -> None:
        resume = await self.get_resume(resume_id)
        await self.db.delete(resume)
        await self.db.commit()
