from typing import List
from sqlalchemy.orm import Session
import logging

from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.modules.clients.service import ClientService
from boutique.shared.database.models import Client, Phone
from .repository import PhoneRepository
from .schemas import PhoneCreate

logger = logging.getLogger(__name__)

class PhoneService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = PhoneRepository(db)
        self.client_service = ClientService(db)

    def insert(self, data: PhoneCreate) -> Phone:
        number, client = self._validate(data)
        phone = self.repository.create(Phone(number=number, client_id=client.id))
        logger.info(f"Phone {phone.id} created for client {client.id}")
        return phone

    def find_by_id(self, phone_id: int) -> Phone:
        phone = self.repository.get_by_id(phone_id)
        if phone is None:
            raise NotFoundError(f"Phone {phone_id} not found")
        return phone

    def list_all(self) -> List[Phone]:
        phones = self.repository.get_all()
        if not phones:
            raise NotFoundError("No phone registered")
        return phones

    def update(self, phone_id: int, data: PhoneCreate) -> Phone:
        phone = self.find_by_id(phone_id)
        number, client = self._validate(data)
        phone.number = number
        phone.client_id = client.id
        phone = self.repository.save(phone)
        logger.info(f"Phone {phone_id} updated")
        return phone

    def delete(self, phone_id: int) -> None:
        phone = self.find_by_id(phone_id)
        self.repository.delete(phone)
        logger.info(f"Phone {phone_id} deleted")

    def find_by_number_order_by_client(self, number: str) -> List[Phone]:
        phones = self.repository.find_by_number_order_by_client(number.strip())
        if not phones:
            raise NotFoundError("No phone found")
        return phones

    def find_by_client(self, client: Client) -> List[Phone]:
        phones = self.repository.find_by_client(client)
        if not phones:
            raise NotFoundError("No phone found")
        return phones

    def _validate(self, data: PhoneCreate):
        if data.number is None or not data.number.strip():
            logger.warning("Phone rejected: blank number")
            raise IntegrityViolationError("Invalid number")
        if data.client_id is None:
            logger.warning("Phone rejected: missing client")
            raise IntegrityViolationError("Invalid client")
        client = self.client_service.find_by_id(data.client_id)
        return data.number.strip(), client
