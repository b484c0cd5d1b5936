# boutique/shared/database/repository.py
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from boutique.config.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic create/read/update/delete access for a single model.

    Module repositories subclass this and add their derived finders.
    Every write commits immediately; a failed commit rolls the session back
    so the caller sees the store unchanged.
    """

    model: Type[ModelType]

    def __init__(self, db: Session):
        self.db = db

    def create(self, entity: ModelType) -> ModelType:
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def get_all(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def save(self, entity: ModelType) -> ModelType:
        """Persist changes made to an already loaded entity"""
        self._commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
