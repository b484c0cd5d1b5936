from typing import List
from sqlalchemy.orm import Session
import logging

from boutique.core.exceptions import IntegrityViolationError, NotFoundError
from boutique.shared.database.models import Category
from .repository import CategoryRepository
from .schemas import CategoryCreate

logger = logging.getLogger(__name__)

class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CategoryRepository(db)

    def insert(self, data: CategoryCreate) -> Category:
        description = self._validate(data)
        category = self.repository.create(Category(description=description))
        logger.info(f"Category {category.id} created")
        return category

    def find_by_id(self, category_id: int) -> Category:
        category = self.repository.get_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category {category_id} not found")
        return category

    def list_all(self) -> List[Category]:
        categories = self.repository.get_all()
        if not categories:
            raise NotFoundError("No category registered")
        return categories

    def update(self, category_id: int, data: CategoryCreate) -> Category:
        category = self.find_by_id(category_id)
        category.description = self._validate(data)
        category = self.repository.save(category)
        logger.info(f"Category {category_id} updated")
        return category

    def delete(self, category_id: int) -> None:
        category = self.find_by_id(category_id)
        self.repository.delete(category)
        logger.info(f"Category {category_id} deleted")

    def find_by_description_containing_ignore_case(self, description: str) -> List[Category]:
        categories = self.repository.find_by_description_containing_ignore_case(description)
        if not categories:
            raise NotFoundError("No category found")
        return categories

    def _validate(self, data: CategoryCreate) -> str:
        if data.description is None or not data.description.strip():
            logger.warning("Category rejected: blank description")
            raise IntegrityViolationError("Invalid description")
        return data.description.strip()
