"""Test configuration and shared fixtures"""

import os
import sys
import uuid
from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient

# enable project imports relative to the current directory
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from mlc.app import app_factory  # noqa: E402
from mlc.config import Config, get_config  # noqa: E402
from mlc.db import DatabaseConnection, forget_db_conn, get_db_conn  # noqa: E402
from mlc.models.card import Card, Gender  # noqa: E402
from mlc.repository.place import PlaceRepository  # noqa: E402
from mlc.services.place import PlaceService  # noqa: E402


# each test class have it's own empty database
@pytest.fixture(scope="class")
def test_config():
    config = Config(
        # overwrite application name so it will use another database file
        app_name=f"mlc-test-{uuid.uuid4().hex[:8]}",
        database_url_env=None,
        admin_place="admin",
        session_cookie="session",
        session_ttl_hours=24,
        tls_enabled=False,
    )
    yield config
    # clean up test database file after tests
    forget_db_conn(config)
    for suffix in ("", "-wal", "-shm"):
        path = f"{config.database_path}{suffix}"
        if os.path.exists(path):
            os.remove(path)


@pytest.fixture(scope="class")
def db_conn(test_config: Config) -> DatabaseConnection:
    return get_db_conn(test_config)


@pytest.fixture(scope="class")
def test_app(test_config: Config, db_conn: DatabaseConnection):
    app = app_factory(test_config)
    app.dependency_overrides = {get_config: lambda: test_config}
    yield app


@pytest.fixture(scope="class")
def client_factory(test_app) -> Callable[[], TestClient]:
    """Every client has its own cookie jar, i.e. is its own terminal."""

    def f() -> TestClient:
        return TestClient(test_app)

    return f


@pytest.fixture(scope="class")
def place_factory(db_conn: DatabaseConnection):
    """Provision a place the way the add_place script does"""

    def f(name: str, password: str) -> int:
        with db_conn.get_session() as session:
            place = PlaceService(PlaceRepository(session)).create(name, password)
            return place.id

    return f


@pytest.fixture(scope="class")
def card_factory(db_conn: DatabaseConnection):
    """Insert a card directly, optionally with an explicit id"""

    def f(balance: int = 0, card_id: int | None = None, name: str = "Ivan") -> int:
        with db_conn.get_session() as session:
            card = Card(
                name=name,
                phone="+70000000000",
                mail="holder@example.com",
                balance=balance,
                count=0,
                gender=Gender.MALE,
            )
            if card_id is not None:
                card.id = card_id
            session.add(card)
            session.commit()
            return card.id

    return f


@pytest.fixture(scope="class")
def login(client_factory):
    """Log a new terminal in. Returns the client and its CSRF token."""

    def f(place: str, password: str) -> tuple[TestClient, str]:
        client = client_factory()
        r = client.post("/place/auth", json={"place": place, "password": password})
        assert r.status_code == 200, r.text
        return client, r.json()["csrf_token"]

    return f


@pytest.fixture
def read_db(db_conn: DatabaseConnection):
    """Run a query in a short lived session, so no lock outlives the check"""

    def f(query: Callable):
        with db_conn.get_session() as session:
            return query(session)

    return f
