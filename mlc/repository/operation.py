"""Repository for Operation model"""

from mlc.models.operation import Operation
from mlc.repository.base import BaseRepository


class OperationRepository(BaseRepository[Operation]):
    model = Operation

    def insert(
        self, *, card_id: int, place_id: int, amount: int, discount: int, cash: int
    ) -> Operation:
        return self.create(
            Operation(
                card_id=card_id,
                place_id=place_id,
                amount=amount,
                discount=discount,
                cash=cash,
            )
        )
