# boutique/modules/sales/router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.modules.clients.service import ClientService
from boutique.shared.schemas.common import BaseResponse
from boutique.shared.utils.dates import string_to_date
from .service import SellService
from .schemas import SellCreate, SellResponse

router = APIRouter()

def _parse_date(value: str):
    try:
        return string_to_date(value)
    except ValueError:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid date '{value}'. Use YYYY-MM-DD or DD-MM-YYYY"
        )

@router.post("", response_model=SellResponse)
def insert_sell(payload: SellCreate, db: Session = Depends(get_db)):
    """
    Register a sale

    **Validations:**
    - `client_id` is required and must exist
    - `date` is required and cannot be after today
    """
    return SellService(db).insert(payload)

@router.get("/between", response_model=List[SellResponse])
def find_sells_between(
    start: str = Query(..., description="First day, inclusive"),
    end: str = Query(..., description="Last day, inclusive"),
    db: Session = Depends(get_db)
):
    """Sales dated between `start` and `end`, both included"""
    return SellService(db).find_by_date_between(_parse_date(start), _parse_date(end))

@router.get("/{sell_id}", response_model=SellResponse)
def find_sell(sell_id: int, db: Session = Depends(get_db)):
    return SellService(db).find_by_id(sell_id)

@router.get("", response_model=List[SellResponse])
def list_sells(db: Session = Depends(get_db)):
    return SellService(db).list_all()

@router.put("/{sell_id}", response_model=SellResponse)
def update_sell(sell_id: int, payload: SellCreate, db: Session = Depends(get_db)):
    """Replace the client and date of a sale"""
    return SellService(db).update(sell_id, payload)

@router.delete("/{sell_id}", response_model=BaseResponse)
def delete_sell(sell_id: int, db: Session = Depends(get_db)):
    SellService(db).delete(sell_id)
    return BaseResponse(success=True, message=f"Sale {sell_id} deleted")

@router.get("/client/{client_id}", response_model=List[SellResponse])
def find_sells_by_client(client_id: int, db: Session = Depends(get_db)):
    """Sales of a client, most recent first"""
    client = ClientService(db).find_by_id(client_id)
    return SellService(db).find_by_client(client)

@router.get("/date/{sell_date}", response_model=List[SellResponse])
def find_sells_by_date(sell_date: str, db: Session = Depends(get_db)):
    """Sales made on an exact day"""
    return SellService(db).find_by_date_order_by_date_desc(_parse_date(sell_date))
