from datetime import datetime
from typing import Any, Dict, List, Optional
from src.shared.schemas import CamelModel
from src.resumes.models import ResumeType


class ResumeBase(CamelModel):
    name: str
    type: ResumeType = ResumeType.RESUME
    content: str
    project_id: Optional[int] = None
    target_position: Optional[str] = None
    target_company: Optional[str] = None


class ResumeCreate(ResumeBase):
    pass


class ResumeUpdate(ResumeBase):
    name: Optional[str] = None
    type: Optional[ResumeType] = None
    content: Optional[str] = None


class ResumeResponse(ResumeBase):
    id: int
    created_at: datetime


class CoverLetterRequest(CamelModel):
    name: str = ""
    job_title: str = ""
    target_position: Optional[str] = None
    target_company: Optional[str] = None
    selected_projects: List[Dict[str, Any]] = []
    job_description: str = ""
    skills: List[str] = []


class CoverLetterResponse(CamelModel):
    cover_letter: str
