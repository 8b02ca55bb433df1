from typing import Optional
from pydantic import EmailStr
from src.shared.schemas import CamelModel

class ClientBase(CamelModel):
    name: str
    email: EmailStr
    company: Optional[str] = None
    language: Optional[str] = None

class ClientCreate(ClientBase):
    pass

class ClientUpdate(ClientBase):
    name: Optional[str] = None
    email: Optional[EmailStr] = None

class ClientResponse(ClientBase):
    id: int
