"""Tests for the place session protocol"""

from datetime import datetime, timedelta, timezone

import pytest

from mlc.errors.auth import (
    AdminRequired,
    CSRFMismatch,
    InvalidCredentials,
    InvalidSignature,
    MalformedSession,
    SessionExpired,
    SessionMissing,
)
from mlc.repository.place import PlaceRepository
from mlc.services.auth import AuthService
from mlc.services.session_codec import SessionCodec

T = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="class")
def codec():
    return SessionCodec.generate()


@pytest.fixture
def auth_service(test_config, db_conn, codec):
    session = db_conn.get_session()
    yield AuthService(
        place_repository=PlaceRepository(session), config=test_config, codec=codec
    )
    session.close()


@pytest.fixture(scope="class", autouse=True)
def places(place_factory):
    place_factory("shop1", "pw123")
    place_factory("admin", "root")


class TestLogin:
    def test_login_issues_session(self, auth_service: AuthService):
        session, cookie = auth_service.login("shop1", "pw123", now=T)
        assert session.place == "shop1"
        assert session.issued_at == T
        assert len(session.csrf) == 44  # base64 of 32 bytes
        assert auth_service.validate(cookie, now=T) == session

    def test_every_login_gets_a_new_csrf_token(self, auth_service: AuthService):
        first, _ = auth_service.login("shop1", "pw123", now=T)
        second, _ = auth_service.login("shop1", "pw123", now=T)
        assert first.csrf != second.csrf

    def test_wrong_password_and_unknown_place_look_the_same(
        self, auth_service: AuthService
    ):
        with pytest.raises(InvalidCredentials) as wrong_password:
            auth_service.login("shop1", "pw124")
        with pytest.raises(InvalidCredentials) as unknown_place:
            auth_service.login("shop2", "pw123")
        assert wrong_password.value.error == unknown_place.value.error
        assert wrong_password.value.http_code == unknown_place.value.http_code


class TestValidate:
    def test_valid_just_before_ttl(self, auth_service: AuthService):
        _, cookie = auth_service.login("shop1", "pw123", now=T)
        session = auth_service.validate(cookie, now=T + timedelta(hours=23, minutes=59))
        assert session.place == "shop1"

    def test_valid_exactly_at_ttl(self, auth_service: AuthService):
        _, cookie = auth_service.login("shop1", "pw123", now=T)
        auth_service.validate(cookie, now=T + timedelta(hours=24))

    def test_expired_after_ttl(self, auth_service: AuthService):
        _, cookie = auth_service.login("shop1", "pw123", now=T)
        with pytest.raises(SessionExpired):
            auth_service.validate(cookie, now=T + timedelta(hours=24, seconds=1))

    def test_missing_cookie(self, auth_service: AuthService):
        with pytest.raises(SessionMissing):
            auth_service.validate(None)
        with pytest.raises(SessionMissing):
            auth_service.validate("")

    def test_tampered_cookie(self, auth_service: AuthService):
        _, cookie = auth_service.login("shop1", "pw123", now=T)
        with pytest.raises(InvalidSignature):
            auth_service.validate(cookie + "x", now=T)

    def test_cookie_from_previous_process(self, auth_service: AuthService, test_config):
        _, cookie = AuthService(
            place_repository=auth_service._place_repository,
            config=test_config,
            codec=SessionCodec.generate(),
        ).login("shop1", "pw123", now=T)
        with pytest.raises(InvalidSignature):
            auth_service.validate(cookie, now=T)

    @pytest.mark.parametrize(
        "value",
        [
            # the old delimited format
            "shop1;Sun, 01 Mar 2026 12:00:00 GMT;c3VwZXJzZWNyZXQ=",
            "not json",
            '{"v": 1, "place": "shop1", "csrf": "abc"}',
            '{"v": 1, "place": "shop1", "issued_at": "yesterday", "csrf": "abc"}',
            '{"v": 1, "place": "shop1", "issued_at": "2026-03-01T12:00:00", "csrf": "abc"}',
            '{"v": 2, "place": "shop1", "issued_at": "2026-03-01T12:00:00Z", "csrf": "abc"}',
            '{"v": 1, "place": "shop1", "issued_at": "2026-03-01T12:00:00Z", "csrf": "abc", "admin": true}',
            '{"v": 1, "place": "", "issued_at": "2026-03-01T12:00:00Z", "csrf": "abc"}',
        ],
    )
    def test_malformed_payload(self, auth_service: AuthService, codec, value):
        cookie = codec.encode("session", value)
        with pytest.raises(MalformedSession):
            auth_service.validate(cookie, now=T)


class TestCSRF:
    def test_own_token_is_accepted(self, auth_service: AuthService):
        session, _ = auth_service.login("shop1", "pw123")
        auth_service.require_csrf(session, session.csrf)

    @pytest.mark.parametrize("supplied", [None, "", "x", "кириллица"])
    def test_wrong_tokens_are_rejected(self, auth_service: AuthService, supplied):
        session, _ = auth_service.login("shop1", "pw123")
        with pytest.raises(CSRFMismatch):
            auth_service.require_csrf(session, supplied)

    def test_token_of_another_session_is_rejected(self, auth_service: AuthService):
        session, _ = auth_service.login("shop1", "pw123")
        other, _ = auth_service.login("shop1", "pw123")
        with pytest.raises(CSRFMismatch):
            auth_service.require_csrf(session, other.csrf)


class TestAdmin:
    def test_only_admin_place_is_admin(self, auth_service: AuthService):
        admin, _ = auth_service.login("admin", "root")
        shop, _ = auth_service.login("shop1", "pw123")
        auth_service.require_admin(admin)
        with pytest.raises(AdminRequired):
            auth_service.require_admin(shop)
