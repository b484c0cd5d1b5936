# boutique/modules/phones/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.modules.clients.service import ClientService
from boutique.shared.schemas.common import BaseResponse
from .service import PhoneService
from .schemas import PhoneCreate, PhoneResponse

router = APIRouter()

@router.post("", response_model=PhoneResponse)
def insert_phone(payload: PhoneCreate, db: Session = Depends(get_db)):
    return PhoneService(db).insert(payload)

@router.get("/{phone_id}", response_model=PhoneResponse)
def find_phone(phone_id: int, db: Session = Depends(get_db)):
    return PhoneService(db).find_by_id(phone_id)

@router.get("", response_model=List[PhoneResponse])
def list_phones(db: Session = Depends(get_db)):
    return PhoneService(db).list_all()

@router.put("/{phone_id}", response_model=PhoneResponse)
def update_phone(phone_id: int, payload: PhoneCreate, db: Session = Depends(get_db)):
    return PhoneService(db).update(phone_id, payload)

@router.delete("/{phone_id}", response_model=BaseResponse)
def delete_phone(phone_id: int, db: Session = Depends(get_db)):
    PhoneService(db).delete(phone_id)
    return BaseResponse(success=True, message=f"Phone {phone_id} deleted")

@router.get("/number/{number}", response_model=List[PhoneResponse])
def find_phones_by_number(number: str, db: Session = Depends(get_db)):
    """Phones with exactly this number, ordered by client"""
    return PhoneService(db).find_by_number_order_by_client(number)

@router.get("/client/{client_id}", response_model=List[PhoneResponse])
def find_phones_by_client(client_id: int, db: Session = Depends(get_db)):
    client = ClientService(db).find_by_id(client_id)
    return PhoneService(db).find_by_client(client)
