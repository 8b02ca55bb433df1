from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from src.shared.schemas import CamelModel


class WebhookPayload(BaseModel):
    """Free-form integration payload; only `type` is required."""
    type: str = Field(min_length=1)
    data: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="allow")


class WebhookAccepted(CamelModel):
    message: str
    data_id: int


class ExternalDataResponse(CamelModel):
    id: int
    source: str
    data_type: str
    content: Any
    processed: bool
    created_at: datetime
