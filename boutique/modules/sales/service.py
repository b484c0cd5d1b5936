from typing import Callable, List, Optional
from datetime import date
from sqlalchemy.orm import Session
import logging

from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.modules.clients.service import ClientService
from boutique.shared.database.models import Client, Sell
from .repository import SellRepository
from .schemas import SellCreate

logger = logging.getLogger(__name__)

class SellService:
    """
    Sale lifecycle.

    A sale always references an existing client and is never dated after
    the reference day returned by ``today`` (the server's local date unless
    a different clock is injected).
    """

    def __init__(self, db: Session, today: Callable[[], date] = date.today):
        self.db = db
        self.today = today
        self.repository = SellRepository(db)
        self.client_service = ClientService(db)

    # ===== CRUD OPERATIONS =====

    def find_by_id(self, sell_id: int) -> Sell:
        sell = self.repository.get_by_id(sell_id)
        if sell is None:
            raise NotFoundError(f"Sale {sell_id} not found")
        return sell

    def list_all(self) -> List[Sell]:
        sells = self.repository.get_all()
        if not sells:
            raise NotFoundError("No sale registered")
        return sells

    def insert(self, data: SellCreate) -> Sell:
        """
        Register a sale.

        Raises:
            IntegrityViolationError: no client given ("Invalid client") or the
                date breaks the date rule ("Invalid date")
            NotFoundError: the client id does not exist
        """
        client = self._resolve_client(data.client_id)
        self._validate_date(data.date)

        sell = self.repository.create(Sell(client_id=client.id, date=data.date))
        logger.info(f"Sale {sell.id} registered for client {client.id} on {sell.date}")
        return sell

    def update(self, sell_id: int, data: SellCreate) -> Sell:
        """
        Replace client and date of an existing sale.

        Every check runs before the entity is touched, so a rejected update
        leaves the stored sale as it was.
        """
        sell = self.find_by_id(sell_id)
        client = self._resolve_client(data.client_id)
        self._validate_date(data.date)

        sell.client_id = client.id
        sell.date = data.date
        sell = self.repository.save(sell)
        logger.info(f"Sale {sell_id} updated")
        return sell

    def delete(self, sell_id: int) -> None:
        sell = self.find_by_id(sell_id)
        self.repository.delete(sell)
        logger.info(f"Sale {sell_id} deleted")

    # ===== QUERIES =====

    def find_by_client(self, client: Client) -> List[Sell]:
        sells = self.repository.find_by_client(client)
        if not sells:
            raise NotFoundError("No sale found")
        return sells

    def find_by_date_order_by_date_desc(self, sell_date: date) -> List[Sell]:
        sells = self.repository.find_by_date_order_by_date_desc(sell_date)
        if not sells:
            raise NotFoundError("No sale found")
        return sells

    def find_by_date_between(self, start: date, end: date) -> List[Sell]:
        sells = self.repository.find_by_date_between(start, end)
        if not sells:
            raise NotFoundError("No sale found")
        return sells

    # ===== VALIDATION =====

    def _resolve_client(self, client_id: Optional[int]) -> Client:
        if client_id is None:
            logger.warning("Sale rejected: missing client")
            raise IntegrityViolationError("Invalid client")
        return self.client_service.find_by_id(client_id)

    def _validate_date(self, sell_date: Optional[date]) -> None:
        if sell_date is None or sell_date > self.today():
            logger.warning(f"Sale rejected: invalid date {sell_date}")
            raise IntegrityViolationError("Invalid date", details={"date": str(sell_date)})
