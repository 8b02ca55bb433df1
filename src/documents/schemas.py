from datetime import datetime
from typing import Optional
from src.shared.schemas import CamelModel
from src.documents.models import DocumentType


class DocumentCreate(CamelModel):
    type: DocumentType
    project_id: Optional[int] = None
    content: str


class DocumentUpdate(CamelModel):
    content: str


class DocumentGenerate(CamelModel):
    # Loosely typed so the service can answer with its own messages
    type: Optional[str] = None
    project_id: Optional[int] = None


class DocumentResponse(CamelModel):
    id: int
    type: DocumentType
    project_id: Optional[int] = None
    content: str
    created_at: datetime
