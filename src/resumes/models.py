from enum import Enum
from sqlalchemy import Column, String, Text, ForeignKey, Enum as SAEnum
from src.database import Base
from src.shared.models import EntityMixin


class ResumeType(str, Enum):
    RESUME = "resume"
    COVER_LETTER = "coverLetter"


class Resume(Base, EntityMixin):
    """Saved resume or cover letter text."""
    __tablename__ = "resumes"

    name = Column(String, nullable=False)
    type = Column(
        SAEnum(ResumeType, name="resume_type", values_callable=lambda e: [m.value for m in e]),
        default=ResumeType.RESUME,
        nullable=False,
    )
    content = Column(Text, nullable=False)
    project_id = Column(ForeignKey("projects.id", ondelete="SET NULL"), nullable=True)
    target_position = Column(String, nullable=True)
    target_company = Column(String, nullable=True)
