"""Base repository with the methods every table needs"""

from typing import Generic, Type, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session

from mlc.db import get_db
from mlc.errors.common import NotFoundError
from mlc.models.base import BaseModel

_M = TypeVar("_M", bound=BaseModel)  # model


class BaseRepository(Generic[_M]):
    """Repositories only flush. Committing is the job of the caller's UnitOfWork."""

    model: Type[_M]
    db: Session

    def __init__(self, db: Session = Depends(get_db)):
        self.db = db

    def create(self, obj: _M) -> _M:
        """Insert a row. Its id is assigned by the database autoincrement."""
        self.db.add(obj)
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def get(self, obj_id: int) -> _M:
        db_obj = self.db.get(self.model, obj_id)
        if not db_obj:
            raise NotFoundError(f"{self.model.__name__}.{obj_id=}")
        return db_obj

    def _expect_one(self, rowcount: int, obj_id: int) -> None:
        if rowcount != 1:
            raise NotFoundError(f"{self.model.__name__}.{obj_id=}")
