from typing import List

from boutique.shared.database.models import Category
from boutique.shared.database.repository import BaseRepository

class CategoryRepository(BaseRepository[Category]):
    model = Category

    def find_by_description_containing_ignore_case(self, description: str) -> List[Category]:
        """Categories whose description contains the text, case-insensitive"""
        return self.db.query(Category).filter(
            Category.description.icontains(description, autoescape=True)
        ).order_by(Category.id).all()
