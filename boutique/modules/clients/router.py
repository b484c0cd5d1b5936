# boutique/modules/clients/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.shared.schemas.common import BaseResponse
from .service import ClientService
from .schemas import ClientCreate, ClientResponse

router = APIRouter()

@router.post("", response_model=ClientResponse)
def insert_client(payload: ClientCreate, db: Session = Depends(get_db)):
    return ClientService(db).insert(payload)

@router.get("/{client_id}", response_model=ClientResponse)
def find_client(client_id: int, db: Session = Depends(get_db)):
    return ClientService(db).find_by_id(client_id)

@router.get("", response_model=List[ClientResponse])
def list_clients(db: Session = Depends(get_db)):
    return ClientService(db).list_all()

@router.put("/{client_id}", response_model=ClientResponse)
def update_client(client_id: int, payload: ClientCreate, db: Session = Depends(get_db)):
    return ClientService(db).update(client_id, payload)

@router.delete("/{client_id}", response_model=BaseResponse)
def delete_client(client_id: int, db: Session = Depends(get_db)):
    """Delete a client, its phones and its sales"""
    ClientService(db).delete(client_id)
    return BaseResponse(success=True, message=f"Client {client_id} deleted")

@router.get("/name/{name}", response_model=List[ClientResponse])
def find_clients_by_name(name: str, db: Session = Depends(get_db)):
    """Clients whose name starts with the given prefix (case-insensitive)"""
    return ClientService(db).find_by_name_starting_with_ignore_case(name)
