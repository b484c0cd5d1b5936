from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.shared.database.models import User, ROLE_ADMIN
from boutique.core.auth.service import AuthService

security = HTTPBearer()

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user"""

    user_id = AuthService.user_id_from_token(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")

    user = db.get(User, user_id)

    if user is None:
        raise AuthenticationError("User not found")

    if not user.is_active:
        raise AuthenticationError("Inactive user")

    return user

def require_roles(allowed_roles: List[str]):
    """Factory for a dependency that requires one of the given roles"""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        # admin passes every role gate
        if ROLE_ADMIN in current_user.roles:
            return current_user
        if not current_user.has_any_role(allowed_roles):
            raise AuthorizationError(
                f"Roles {current_user.roles} not authorized. Allowed roles: {allowed_roles}"
            )
        return current_user
    return role_checker

def get_admin_user(current_user: User = Depends(require_roles([ROLE_ADMIN]))):
    """Dependency for administrators"""
    return current_user
