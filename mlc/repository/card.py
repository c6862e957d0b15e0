"""Repository for Card model"""

from sqlalchemy import select, update

from mlc.errors.common import NotFoundError
from mlc.models.card import Card
from mlc.repository.base import BaseRepository


class CardRepository(BaseRepository[Card]):
    model = Card

    def get_balance(self, card_id: int, for_update: bool = False) -> int:
        query = select(Card.balance).where(Card.id == card_id)
        if for_update:
            # lock the row until the ledger transaction ends (ignored by SQLite)
            query = query.with_for_update()
        balance = self.db.execute(query).scalar_one_or_none()
        if balance is None:
            raise NotFoundError(f"{self.model.__name__}.{card_id=}")
        return balance

    def increment_balance(self, card_id: int, delta: int) -> None:
        result = self.db.execute(
            update(Card).where(Card.id == card_id).values(balance=Card.balance + delta)
        )
        self._expect_one(result.rowcount, card_id)

    def increment_count(self, card_id: int) -> None:
        result = self.db.execute(
            update(Card).where(Card.id == card_id).values(count=Card.count + 1)
        )
        self._expect_one(result.rowcount, card_id)
