"""Base for all ORM models"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class BaseModel(DeclarativeBase):
    # do not create separate table for this class
    __abstract__ = True

    # sequential ids are never reused, even after a rollback on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=func.now(), nullable=False
    )

    def __repr__(self):
        """Automatically generate a readable __repr__ of a database object"""
        model_name = self.__class__.__name__
        attr_strs = []
        for attr, column in inspect(self.__class__).columns.items():
            value = getattr(self, attr)
            attr_strs.append(f"{attr}={value!r}")
        attr_str = ", ".join(attr_strs)
        return f"<{model_name}({attr_str})>"
