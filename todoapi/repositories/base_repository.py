from operator import eq
from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
import logging

from todoapi.models.base import Base

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        entity: Any | None = self.db.query(self.model).filter(eq(self.model.id, entity_id)).first()

        if entity is None:
            logger.debug(f"{self.model.__name__} with id {entity_id} not found")

        return entity

    async def get_all(self) -> List[T]:
        return self.db.query(self.model).order_by(self.model.id).all()

    async def save(self, entity: T) -> T:
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)

            logger.info(f"Saved {self.model.__name__} with id {entity.id}")
            return entity
        except Exception as e:
            logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise

    async def remove(self, entity: T) -> None:
        try:
            entity_id = entity.id
            self.db.delete(entity)
            self.db.commit()

            logger.info(f"Deleted {self.model.__name__} with id {entity_id}")
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
