from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from src.database import Base
from src.shared.models import IntegerIdMixin


class Client(Base, IntegerIdMixin):
    """Customer the freelancer works for."""
    __tablename__ = "clients"

    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    company = Column(String, nullable=True)
    language = Column(String, nullable=True)  # e.g. "English, German"

    projects = relationship("src.projects.models.Project", back_populates="client")
