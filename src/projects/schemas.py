from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import Field, field_validator
from src.shared.schemas import CamelModel
from src.projects.lifecycle import ProjectStatus, as_naive_utc

class ProjectBase(CamelModel):
    client_id: int
    name: str
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    amount: Optional[float] = Field(default=None, ge=0)
    volume: Optional[int] = Field(default=None, ge=0)
    source_lang: Optional[str] = None
    target_lang: Optional[str] = None
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    invoice_sent: bool = False
    is_paid: bool = False
    is_archived: bool = False

    @field_validator("deadline")
    @classmethod
    def _naive_utc_deadline(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value) if value is not None else None

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(ProjectBase):
    client_id: Optional[int] = None
    name: Optional[str] = None
    status: Optional[ProjectStatus] = None
    invoice_sent: Optional[bool] = None
    is_paid: Optional[bool] = None
    is_archived: Optional[bool] = None

class ProjectResponse(ProjectBase):
    id: int
    labels: List[str] = []


class MindMap(CamelModel):
    nodes: List[Dict[str, Any]]
    edges: List[Dict[str, Any]]

class MindMapSaved(CamelModel):
    message: str
    project_id: int
