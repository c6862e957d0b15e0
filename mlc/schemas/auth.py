"""DTO for place authentication and sessions"""

from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from mlc.schemas.base import BaseSchema, CSRFProtectedSchema


class PlaceSession(BaseModel):
    """Everything a session cookie carries. Versioned, no delimiter tricks."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    v: Literal[1] = 1
    place: str = Field(min_length=1)
    issued_at: AwareDatetime
    csrf: str = Field(min_length=1)


class LoginSchema(BaseSchema):
    place: str
    password: str


class LoginResponseSchema(BaseSchema):
    place: str
    csrf_token: str
    admin: bool


class PasswordChangeSchema(CSRFProtectedSchema):
    current_password: str
    new_password: str = Field(min_length=1)
