from typing import List, Optional

from sqlalchemy import func

from boutique.shared.database.models import User
from boutique.shared.database.repository import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    def find_by_name_starting_with_ignore_case(self, name: str) -> List[User]:
        return self.db.query(User).filter(
            User.name.istartswith(name, autoescape=True)
        ).order_by(User.name, User.id).all()

    def find_by_name(self, name: str) -> List[User]:
        return self.db.query(User).filter(
            User.name == name
        ).order_by(User.id).all()

    def find_by_email(self, email: str) -> Optional[User]:
        """Email lookup, case-insensitive"""
        return self.db.query(User).filter(
            func.lower(User.email) == email.strip().lower()
        ).first()
