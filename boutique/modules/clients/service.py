from typing import List
from sqlalchemy.orm import Session
import logging

from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.shared.database.models import Client
from .repository import ClientRepository
from .schemas import ClientCreate

logger = logging.getLogger(__name__)

class ClientService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ClientRepository(db)

    def insert(self, data: ClientCreate) -> Client:
        name = self._validate_name(data.name)
        client = self.repository.create(Client(name=name, address=data.address))
        logger.info(f"Client {client.id} created")
        return client

    def find_by_id(self, client_id: int) -> Client:
        client = self.repository.get_by_id(client_id)
        if client is None:
            raise NotFoundError(f"Client {client_id} not found")
        return client

    def list_all(self) -> List[Client]:
        clients = self.repository.get_all()
        if not clients:
            raise NotFoundError("No client registered")
        return clients

    def update(self, client_id: int, data: ClientCreate) -> Client:
        client = self.find_by_id(client_id)
        name = self._validate_name(data.name)
        client.name = name
        client.address = data.address
        client = self.repository.save(client)
        logger.info(f"Client {client_id} updated")
        return client

    def delete(self, client_id: int) -> None:
        """Delete a client together with its phones and sales"""
        client = self.find_by_id(client_id)
        self.repository.delete(client)
        logger.info(f"Client {client_id} deleted")

    def find_by_name_starting_with_ignore_case(self, name: str) -> List[Client]:
        clients = self.repository.find_by_name_starting_with_ignore_case(name)
        if not clients:
            raise NotFoundError("No client found")
        return clients

    @staticmethod
    def _validate_name(name: str) -> str:
        if name is None or not name.strip():
            logger.warning("Client rejected: blank name")
            raise IntegrityViolationError("Invalid name")
        return name.strip()
