"""Place model. A cashier terminal that logs in and records operations."""

from sqlalchemy import CheckConstraint, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from mlc.models.base import BaseModel


class Place(BaseModel):
    __tablename__ = "places"
    __table_args__ = (
        CheckConstraint("cash >= 0", name="ck_places_cash_non_negative"),
        {"sqlite_autoincrement": True},
    )

    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(16), nullable=False)
    password_salt: Mapped[str] = mapped_column(String(32), nullable=False)

    # discounts handed out since the float was last collected
    cash: Mapped[int] = mapped_column(default=0, nullable=False)
