from pydantic import BaseModel, Field
from typing import Optional

class ClientCreate(BaseModel):
    """Payload to create or replace a client"""
    name: str = Field(..., max_length=255, description="Client name")
    address: Optional[str] = Field(None, description="Postal address")

class ClientResponse(BaseModel):
    id: int
    name: str
    address: Optional[str] = None

    class Config:
        from_attributes = True
