"""Card service"""

import logging

from fastapi import Depends

from mlc.models.card import Card
from mlc.repository.card import CardRepository
from mlc.schemas.card import CardCreateSchema, CardSchema
from mlc.services.discount import discount_percent
from mlc.uow import UnitOfWork

logger = logging.getLogger(__name__)


class CardService:
    def __init__(self, card_repository: CardRepository = Depends()):
        self._card_repository = card_repository

    def create(self, schema: CardCreateSchema) -> Card:
        with UnitOfWork(self._card_repository.db):
            card = self._card_repository.create(
                Card(
                    name=schema.name,
                    phone=schema.phone,
                    mail=schema.mail,
                    balance=schema.balance,
                    count=0,
                    gender=schema.gender_enum(),
                )
            )
        logger.info("Issued card %s", card.id)
        return card

    def get(self, card_id: int) -> Card:
        return self._card_repository.get(card_id)

    def get_info(self, card_id: int) -> CardSchema:
        card = self._card_repository.get(card_id)
        return CardSchema(
            id=card.id,
            created_at=card.created_at,
            name=card.name,
            phone=card.phone,
            mail=card.mail,
            balance=card.balance,
            count=card.count,
            gender=card.gender,
            discount_percent=discount_percent(card.balance),
        )
