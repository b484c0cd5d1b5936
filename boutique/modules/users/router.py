# boutique/modules/users/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.core.auth.dependencies import get_admin_user
from boutique.shared.schemas.common import BaseResponse
from .service import UserService
from .schemas import UserCreate, UserResponse

# Every user endpoint is restricted to administrators
router = APIRouter(dependencies=[Depends(get_admin_user)])

@router.post("", response_model=UserResponse)
def insert_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).insert(payload)

@router.get("/{user_id}", response_model=UserResponse)
def find_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).find_by_id(user_id)

@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_all()

@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).update(user_id, payload)

@router.delete("/{user_id}", response_model=BaseResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    UserService(db).delete(user_id)
    return BaseResponse(success=True, message=f"User {user_id} deleted")

@router.get("/name/{name}", response_model=List[UserResponse])
def find_users_by_name(name: str, db: Session = Depends(get_db)):
    return UserService(db).find_by_name_starting_with_ignore_case(name)

@router.get("/name-exact/{name}", response_model=List[UserResponse])
def find_users_by_exact_name(name: str, db: Session = Depends(get_db)):
    return UserService(db).find_by_name(name)

@router.get("/email/{email}", response_model=UserResponse)
def find_user_by_email(email: str, db: Session = Depends(get_db)):
    return UserService(db).find_by_email(email)
