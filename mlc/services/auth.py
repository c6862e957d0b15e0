"""Place authentication. Sessions are stateless: everything lives in a signed cookie.

A session can not be revoked before it expires (24 hours by default); logging
out only overwrites the cookie on the client.
"""

import base64
import hmac
import logging
import secrets
from datetime import datetime, timezone

from fastapi import Depends
from pydantic import ValidationError

from mlc.config import Config, get_config
from mlc.errors.auth import (
    AdminRequired,
    CSRFMismatch,
    InvalidCredentials,
    MalformedSession,
    SessionExpired,
    SessionMissing,
)
from mlc.errors.common import InternalError, NotFoundError
from mlc.repository.place import PlaceRepository
from mlc.schemas.auth import PlaceSession
from mlc.services.password import PasswordHasher
from mlc.services.session_codec import SessionCodec, get_session_codec

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    # sessions carry second precision
    return datetime.now(timezone.utc).replace(microsecond=0)


class AuthService:
    CSRF_TOKEN_SIZE = 32

    # hashed against when the place does not exist, so both failures cost the same
    _DUMMY_SALT = "AAAAAAAAAAAAAAAAAAAAAA=="

    def __init__(
        self,
        place_repository: PlaceRepository = Depends(),
        config: Config = Depends(get_config),
        codec: SessionCodec = Depends(get_session_codec),
    ):
        self._place_repository = place_repository
        self._config = config
        self._codec = codec

    @classmethod
    def new_csrf_token(cls) -> str:
        try:
            raw = secrets.token_bytes(cls.CSRF_TOKEN_SIZE)
        except (OSError, NotImplementedError) as exc:
            raise InternalError("entropy source") from exc
        return base64.b64encode(raw).decode("ascii")

    def check_password(self, place_name: str, password: str) -> None:
        """Raise InvalidCredentials unless the place exists and the password matches."""
        try:
            credential = self._place_repository.get_credential(place_name)
        except NotFoundError:
            PasswordHasher.hash(password, self._DUMMY_SALT)
            raise InvalidCredentials
        if not PasswordHasher.verify(
            password, credential.password_hash, credential.password_salt
        ):
            raise InvalidCredentials

    def login(
        self, place_name: str, password: str, now: datetime | None = None
    ) -> tuple[PlaceSession, str]:
        """Check the password and issue a new session.

        Returns the session and the value to put into the session cookie.
        """
        try:
            self.check_password(place_name, password)
        except InvalidCredentials:
            logger.warning("Failed login attempt for place %r", place_name)
            raise
        session = PlaceSession(
            place=place_name,
            issued_at=now or utcnow(),
            csrf=self.new_csrf_token(),
        )
        cookie = self._codec.encode(
            self._config.session_cookie, session.model_dump_json()
        )
        logger.info("Place %r logged in", place_name)
        return session, cookie

    def validate(self, cookie: str | None, now: datetime | None = None) -> PlaceSession:
        if not cookie:
            raise SessionMissing
        value = self._codec.decode(self._config.session_cookie, cookie)
        try:
            session = PlaceSession.model_validate_json(value)
        except ValidationError as exc:
            raise MalformedSession from exc
        if (now or utcnow()) > session.issued_at + self._config.session_ttl:
            raise SessionExpired(f"issued at {session.issued_at.isoformat()}")
        return session

    def require_csrf(self, session: PlaceSession, supplied: str | None) -> None:
        if not supplied or not hmac.compare_digest(
            supplied.encode("utf-8"), session.csrf.encode("utf-8")
        ):
            logger.warning("CSRF token mismatch for place %r", session.place)
            raise CSRFMismatch

    def is_admin(self, session: PlaceSession) -> bool:
        return session.place == self._config.admin_place

    def require_admin(self, session: PlaceSession) -> None:
        if not self.is_admin(session):
            raise AdminRequired
