from pydantic import BaseModel, Field

class CategoryCreate(BaseModel):
    """Payload to create or replace a category"""
    description: str = Field(..., max_length=255, description="Category description")

class CategoryResponse(BaseModel):
    id: int
    description: str

    class Config:
        from_attributes = True
