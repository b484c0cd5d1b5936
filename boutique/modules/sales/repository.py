from typing import List
from datetime import date

from sqlalchemy import desc

from boutique.shared.database.models import Client, Sell
from boutique.shared.database.repository import BaseRepository

class SellRepository(BaseRepository[Sell]):
    model = Sell

    def find_by_client(self, client: Client) -> List[Sell]:
        """Sales of a client, most recent first"""
        return self.db.query(Sell).filter(
            Sell.client_id == client.id
        ).order_by(desc(Sell.date), desc(Sell.id)).all()

    def find_by_date_order_by_date_desc(self, sell_date: date) -> List[Sell]:
        return self.db.query(Sell).filter(
            Sell.date == sell_date
        ).order_by(desc(Sell.date), desc(Sell.id)).all()

    def find_by_date_between(self, start: date, end: date) -> List[Sell]:
        """Sales dated within [start, end], both ends included"""
        return self.db.query(Sell).filter(
            Sell.date >= start,
            Sell.date <= end
        ).order_by(Sell.date, Sell.id).all()
