from pydantic import BaseModel, Field
from typing import List

class UserLogin(BaseModel):
    """Login payload"""
    email: str = Field(..., description="User email")
    password: str = Field(..., min_length=6, description="User password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "admin@boutique.com",
                "password": "admin123"
            }
        }

class AuthUserResponse(BaseModel):
    """Authenticated user"""
    id: int
    name: str
    email: str
    roles: List[str]
    is_active: bool

    class Config:
        from_attributes = True

class TokenResponse(BaseModel):
    """Token response"""
    access_token: str
    token_type: str = "bearer"
    user: AuthUserResponse
