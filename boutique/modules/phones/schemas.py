from pydantic import BaseModel, Field
from typing import Optional

class PhoneCreate(BaseModel):
    """Payload to create or replace a phone"""
    number: str = Field(..., max_length=50, description="Phone number")
    client_id: Optional[int] = Field(None, description="Owning client")

class PhoneResponse(BaseModel):
    id: int
    number: str
    client_id: int

    class Config:
        from_attributes = True
