from sqlalchemy import Column, String, Text, Integer, Float, Boolean, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from src.database import Base
from src.shared.models import IntegerIdMixin
from src.projects.lifecycle import ProjectStatus


class Project(Base, IntegerIdMixin):
    """A piece of paid work for one client, e.g. a translation job."""
    __tablename__ = "projects"

    client_id = Column(ForeignKey("clients.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(DateTime, nullable=True)  # naive UTC
    amount = Column(Float, nullable=True)
    volume = Column(Integer, nullable=True)  # word / unit count
    source_lang = Column(String, nullable=True)
    target_lang = Column(String, nullable=True)

    status = Column(
        SAEnum(ProjectStatus, name="project_status", values_callable=lambda e: [m.value for m in e]),
        default=ProjectStatus.IN_PROGRESS,
        nullable=False,
    )
    invoice_sent = Column(Boolean, default=False, nullable=False)
    is_paid = Column(Boolean, default=False, nullable=False)
    is_archived = Column(Boolean, default=False, nullable=False)

    client = relationship("src.clients.models.Client", back_populates="projects")
