"""Signed session tokens for cookies.

A token is an HS256 JWT whose audience is the cookie name, so a value issued
for one cookie can not be replayed as another one. The key lives only in
memory: restarting the process logs every place out.
"""

import secrets

import jwt
from fastapi import Request

from mlc.errors.auth import InvalidSignature


class SessionCodec:
    ALGORITHM = "HS256"
    KEY_SIZE = 64

    def __init__(self, key: bytes):
        if len(key) < 32:
            raise ValueError("session key is too short")
        self._key = key

    @classmethod
    def generate(cls) -> "SessionCodec":
        return cls(secrets.token_bytes(cls.KEY_SIZE))

    def encode(self, name: str, value: str) -> str:
        return jwt.encode(
            {"aud": name, "val": value}, self._key, algorithm=self.ALGORITHM
        )

    def decode(self, name: str, token: str) -> str:
        try:
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[self.ALGORITHM],
                audience=name,
                options={"require": ["aud"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidSignature from exc
        value = payload.get("val")
        if not isinstance(value, str):
            raise InvalidSignature
        return value


def get_session_codec(request: Request) -> SessionCodec:
    """The codec built together with the application, see app_factory()."""
    return request.app.state.session_codec
