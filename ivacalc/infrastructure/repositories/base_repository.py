"""
SQLAlchemy implementation of the Base Repository.
"""

from datetime import datetime
from typing import Any, Generic, Optional, Type, TypeVar

import pytz
from sqlalchemy.orm import Session

from ivacalc.config import get_settings
from ivacalc.domain.repositories.base import BaseRepository
from ivacalc.infrastructure.database import Base

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def now(self) -> datetime:
        """Current time in the configured timezone."""
        return datetime.now(tz)

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def create(self, obj_in: Any) -> ModelType:
        # obj_in is a dict or pydantic model
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_data = dict(obj_in)

        obj_data["created_at"] = self.now()

        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj
