from typing import List

from boutique.shared.database.models import Client
from boutique.shared.database.repository import BaseRepository

class ClientRepository(BaseRepository[Client]):
    model = Client

    def find_by_name_starting_with_ignore_case(self, name: str) -> List[Client]:
        """Clients whose name starts with the prefix, case-insensitive"""
        return self.db.query(Client).filter(
            Client.name.istartswith(name, autoescape=True)
        ).order_by(Client.name, Client.id).all()
