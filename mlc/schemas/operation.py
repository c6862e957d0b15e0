"""DTO for Operation"""

from pydantic import Field

from mlc.schemas.base import (
    BaseReadSchema,
    BaseSchema,
    CashCount,
    CSRFProtectedSchema,
)


class OperationCreateSchema(CSRFProtectedSchema):
    card: CashCount
    amount: CashCount = Field(gt=0)
    # cash received from the customer
    cash: CashCount


class OperationSchema(BaseReadSchema):
    card_id: int
    place_id: int
    amount: int
    discount: int
    cash: int


class ReceiptSchema(BaseSchema):
    operation: OperationSchema
    holder: str
    card: int
    amount: int
    discount_percent: int
    discount: int
    total: int
    # negative when the customer paid less than the total
    change: int
