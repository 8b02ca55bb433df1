from sqlalchemy import Column, String, Boolean, JSON
from src.database import Base
from src.shared.models import EntityMixin


class ExternalData(Base, EntityMixin):
    """Payload pushed in by a third-party integration through the webhook."""
    __tablename__ = "external_data"

    source = Column(String, nullable=False)
    data_type = Column(String, nullable=False)
    content = Column(JSON, nullable=False)
    processed = Column(Boolean, default=False, nullable=False)
