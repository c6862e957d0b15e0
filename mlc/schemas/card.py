"""DTO for Card"""

from typing import Literal

from pydantic import Field

from mlc.models.card import Gender
from mlc.schemas.base import (
    BaseReadSchema,
    BaseSchema,
    CashCount,
    CSRFProtectedSchema,
)


class CardCreateSchema(CSRFProtectedSchema):
    name: str = Field(min_length=1, max_length=255)
    phone: str = Field(default="", max_length=64)
    mail: str = Field(default="", max_length=255)
    balance: CashCount = 0
    # as typed in the admin form
    gender: Literal["m", "f"]

    def gender_enum(self) -> Gender:
        return Gender.MALE if self.gender == "m" else Gender.FEMALE


class CardCreatedSchema(BaseSchema):
    id: int


class CardInfoRequestSchema(CSRFProtectedSchema):
    card: CashCount


class CardSchema(BaseReadSchema):
    name: str
    phone: str
    mail: str
    balance: int
    count: int
    gender: Gender
    discount_percent: int
