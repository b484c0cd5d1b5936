from pydantic import BaseModel, Field, validator
from typing import List, Optional

from boutique.shared.database.models import KNOWN_ROLES

class UserCreate(BaseModel):
    """Payload to create or replace a user"""
    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    password: Optional[str] = Field(None, min_length=6, description="Required on creation, optional on update")
    roles: Optional[List[str]] = Field(None, description="Defaults to ['user'] on creation")
    is_active: bool = True

    @validator('roles')
    def validate_roles(cls, v):
        if v is None:
            return v
        roles = [role.strip().lower() for role in v]
        unknown = [role for role in roles if role not in KNOWN_ROLES]
        if unknown:
            raise ValueError(f"Unknown roles {unknown}. Allowed: {list(KNOWN_ROLES)}")
        return sorted(set(roles))

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Maria Silva",
                "email": "maria@boutique.com",
                "password": "secret123",
                "roles": ["user"]
            }
        }

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    roles: List[str]
    is_active: bool

    class Config:
        from_attributes = True
