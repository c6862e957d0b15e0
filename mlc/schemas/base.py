"""Base DTOs for API endpoints"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# cash amounts, counters and card numbers are unsigned 32-bit values
MAX_CASH_COUNT = 2**32 - 1

CashCount = Annotated[int, Field(ge=0, le=MAX_CASH_COUNT)]


class BaseSchema(BaseModel):
    # needed for ORM
    model_config = ConfigDict(
        from_attributes=True,
        arbitrary_types_allowed=True,
    )


class BaseReadSchema(BaseSchema):
    id: int
    created_at: datetime


class CSRFProtectedSchema(BaseSchema):
    """Body of every mutating request made by a logged in place."""

    csrf_token: str = ""
