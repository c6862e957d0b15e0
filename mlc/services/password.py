"""Password hashing for places. scrypt with fixed cost parameters."""

import base64
import hashlib
import hmac
import logging
import secrets

from mlc.errors.common import InternalError

logger = logging.getLogger(__name__)


class PasswordHasher:
    # scrypt cost parameters, changing them invalidates every stored password
    N = 16384
    R = 8
    P = 1
    DIGEST_SIZE = 16
    SALT_SIZE = 16

    @classmethod
    def hash(cls, password: str, salt: str) -> bytes:
        """Derive a 16 byte digest. The salt is used as its stored (base64) string."""
        try:
            return hashlib.scrypt(
                password.encode("utf-8"),
                salt=salt.encode("utf-8"),
                n=cls.N,
                r=cls.R,
                p=cls.P,
                dklen=cls.DIGEST_SIZE,
            )
        except (ValueError, MemoryError) as exc:
            logger.error("scrypt failed: %s", exc)
            raise InternalError("password hashing") from exc

    @classmethod
    def new_salt(cls) -> str:
        try:
            raw = secrets.token_bytes(cls.SALT_SIZE)
        except (OSError, NotImplementedError) as exc:
            logger.error("entropy source failed: %s", exc)
            raise InternalError("entropy source") from exc
        return base64.b64encode(raw).decode("ascii")

    @classmethod
    def new_credential(cls, password: str) -> tuple[bytes, str]:
        """Generate a random salt and hash the password with it. Returns (digest, salt)."""
        salt = cls.new_salt()
        return cls.hash(password, salt), salt

    @classmethod
    def verify(cls, password: str, stored_hash: bytes, stored_salt: str) -> bool:
        return hmac.compare_digest(cls.hash(password, stored_salt), stored_hash)
