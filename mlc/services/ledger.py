"""Ledger service. Records a purchase made with a card at a place."""

import logging

from fastapi import Depends

from mlc.errors.operation import InvalidOperation
from mlc.models.operation import Operation
from mlc.repository.card import CardRepository
from mlc.repository.operation import OperationRepository
from mlc.repository.place import PlaceRepository
from mlc.schemas.base import MAX_CASH_COUNT
from mlc.services.discount import compute_discount
from mlc.uow import UnitOfWork

logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(
        self,
        card_repository: CardRepository = Depends(),
        place_repository: PlaceRepository = Depends(),
        operation_repository: OperationRepository = Depends(),
    ):
        self._card_repository = card_repository
        self._place_repository = place_repository
        self._operation_repository = operation_repository

    def record_operation(
        self, *, place_name: str, card_id: int, amount: int, cash: int
    ) -> Operation:
        """Record a purchase and apply its effects.

        Steps:
        1. Read the card balance before the purchase and the place id.
        2. Compute the discount from that balance.
        3. Append the operation to the ledger.
        4. Credit the discount to the cash float of the place.
        5. Add the amount to the card balance and count the usage.

        Everything happens in one transaction. A missing card or place, or
        any database failure, leaves no trace.
        """
        if not 0 < amount <= MAX_CASH_COUNT:
            raise InvalidOperation(f"{amount=}")
        if not 0 <= cash <= MAX_CASH_COUNT:
            raise InvalidOperation(f"{cash=}")

        with UnitOfWork(self._operation_repository.db):
            balance = self._card_repository.get_balance(card_id, for_update=True)
            place_id = self._place_repository.get_id(place_name)

            discount = compute_discount(amount, balance)

            operation = self._operation_repository.insert(
                card_id=card_id,
                place_id=place_id,
                amount=amount,
                discount=discount,
                cash=cash,
            )
            self._place_repository.increment_cash(place_id, discount)
            self._card_repository.increment_balance(card_id, amount)
            self._card_repository.increment_count(card_id)

        logger.info(
            "Operation %s: place %r, card %s, amount %d, discount %d",
            operation.id,
            place_name,
            card_id,
            amount,
            discount,
        )
        return operation
