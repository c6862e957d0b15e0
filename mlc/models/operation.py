"""Operation model. Append-only ledger of purchases made with a card."""

from sqlalchemy import CheckConstraint, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mlc.models.base import BaseModel
from mlc.models.card import Card
from mlc.models.place import Place


class Operation(BaseModel):
    __tablename__ = "operations"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_operations_amount_positive"),
        CheckConstraint("discount >= 0", name="ck_operations_discount_non_negative"),
        CheckConstraint("cash >= 0", name="ck_operations_cash_non_negative"),
        {"sqlite_autoincrement": True},
    )

    card_id: Mapped[int] = mapped_column(ForeignKey("cards.id"), nullable=False)
    card: Mapped[Card] = relationship(foreign_keys=[card_id])

    place_id: Mapped[int] = mapped_column(ForeignKey("places.id"), nullable=False)
    place: Mapped[Place] = relationship(foreign_keys=[place_id])

    amount: Mapped[int] = mapped_column(nullable=False)
    discount: Mapped[int] = mapped_column(nullable=False)
    # cash received from the customer
    cash: Mapped[int] = mapped_column(nullable=False)
