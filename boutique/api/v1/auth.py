from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
import logging

from boutique.config.database import get_db
from boutique.core.auth.service import AuthService
from boutique.core.auth.schemas import UserLogin, TokenResponse, AuthUserResponse
from boutique.core.auth.dependencies import get_current_user
from boutique.modules.users.repository import UserRepository
from boutique.shared.database.models import User

logger = logging.getLogger(__name__)

router = APIRouter()

def _authenticate(db: Session, email: str, password: str) -> TokenResponse:
    user = UserRepository(db).find_by_email(email)

    if not user or not AuthService.verify_password(password, user.password_hash):
        logger.warning(f"Failed login for {email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Inactive user"
        )

    return TokenResponse(
        access_token=AuthService.create_access_token(user),
        token_type="bearer",
        user=AuthUserResponse.model_validate(user)
    )

@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login with an OAuth2 password form

    **Parameters:**
    - **username**: user email
    - **password**: user password
    """
    return _authenticate(db, form_data.username, form_data.password)

@router.post("/login-json", response_model=TokenResponse)
def login_json(
    user_login: UserLogin,
    db: Session = Depends(get_db)
):
    """Login with a JSON body `{"email": ..., "password": ...}`"""
    return _authenticate(db, user_login.email, user_login.password)

@router.get("/me", response_model=AuthUserResponse)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """
    Current user

    **Required headers:**
    - Authorization: Bearer {token}
    """
    return current_user
