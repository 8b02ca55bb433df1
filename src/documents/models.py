from enum import Enum
from sqlalchemy import Column, Text, ForeignKey, Enum as SAEnum
from src.database import Base
from src.shared.models import EntityMixin


class DocumentType(str, Enum):
    INVOICE = "invoice"
    CONTRACT = "contract"


class Document(Base, EntityMixin):
    """Generated or hand-written invoice / contract text."""
    __tablename__ = "documents"

    type = Column(
        SAEnum(DocumentType, name="document_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    project_id = Column(ForeignKey("projects.id", ondelete="SET NULL"), nullable=True, index=True)
    content = Column(Text, nullable=False)
