from typing import List

from boutique.shared.database.models import Client, Phone
from boutique.shared.database.repository import BaseRepository

class PhoneRepository(BaseRepository[Phone]):
    model = Phone

    def find_by_number_order_by_client(self, number: str) -> List[Phone]:
        return self.db.query(Phone).filter(
            Phone.number == number
        ).order_by(Phone.client_id, Phone.id).all()

    def find_by_client(self, client: Client) -> List[Phone]:
        return self.db.query(Phone).filter(
            Phone.client_id == client.id
        ).order_by(Phone.id).all()
