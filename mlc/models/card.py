"""Card model. A customer's discount card, issued by the admin place."""

import enum

from sqlalchemy import CheckConstraint, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from mlc.models.base import BaseModel


class Gender(enum.Enum):
    MALE = "male"
    FEMALE = "female"


class Card(BaseModel):
    __tablename__ = "cards"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_cards_balance_non_negative"),
        CheckConstraint("count >= 0", name="ck_cards_count_non_negative"),
        {"sqlite_autoincrement": True},
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    mail: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # total amount spent with the card, drives the discount tier
    balance: Mapped[int] = mapped_column(default=0, nullable=False)
    # number of operations made with the card
    count: Mapped[int] = mapped_column(default=0, nullable=False)

    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, native_enum=False, length=16), nullable=False
    )
