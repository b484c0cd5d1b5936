from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt

class SellCreate(BaseModel):
    """Payload to register or replace a sale"""
    client_id: Optional[int] = Field(None, description="Client that made the purchase")
    date: Optional[dt.date] = Field(None, description="Transaction date (not after today)")

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": 1,
                "date": "2023-01-31"
            }
        }

class SellResponse(BaseModel):
    id: int
    client_id: int
    client_name: Optional[str] = None
    date: dt.date

    class Config:
        from_attributes = True
