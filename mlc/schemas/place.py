"""DTO for Place"""

from mlc.schemas.base import BaseSchema


class PlaceMainSchema(BaseSchema):
    place: str
    csrf_token: str
    cash: int
    admin: bool


class CashCollectedSchema(BaseSchema):
    place: str
    collected: int
