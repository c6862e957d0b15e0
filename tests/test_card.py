"""Tests for card issue and lookup"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from mlc.repository.card import CardRepository
from mlc.repository.place import PlaceRepository
from mlc.schemas.card import CardCreateSchema
from mlc.services.card import CardService


@pytest.fixture(scope="class", autouse=True)
def places(place_factory):
    place_factory("admin", "root")
    place_factory("shop1", "pw123")


CARD = {
    "name": "Anna Ivanova",
    "phone": "+79990000000",
    "mail": "anna@example.com",
    "balance": 36000,
    "gender": "f",
}


class TestCardIssue:
    def test_admin_issues_cards(self, login):
        client, csrf = login("admin", "root")
        r1 = client.post("/admin/cards", json={**CARD, "csrf_token": csrf})
        assert r1.status_code == 200, r1.text
        r2 = client.post(
            "/admin/cards", json={**CARD, "name": "Oleg", "gender": "m", "csrf_token": csrf}
        )
        assert r2.status_code == 200, r2.text
        assert r2.json()["id"] == r1.json()["id"] + 1

    def test_other_places_can_not_issue_cards(self, login):
        client, csrf = login("shop1", "pw123")
        r = client.post("/admin/cards", json={**CARD, "csrf_token": csrf})
        assert r.status_code == 403
        assert r.json()["error_code"] == 3006

    def test_issue_requires_csrf(self, login):
        client, _ = login("admin", "root")
        r = client.post("/admin/cards", json=CARD)
        assert r.status_code == 403
        assert r.json()["error_code"] == 3005

    @pytest.mark.parametrize(
        "patch", [{"gender": "x"}, {"balance": -1}, {"balance": 10**19}, {"name": ""}]
    )
    def test_invalid_card(self, login, patch):
        client, csrf = login("admin", "root")
        r = client.post("/admin/cards", json={**CARD, **patch, "csrf_token": csrf})
        assert r.status_code == 422


class TestCardInfo:
    def test_card_report(self, login):
        admin, admin_csrf = login("admin", "root")
        card_id = admin.post(
            "/admin/cards", json={**CARD, "csrf_token": admin_csrf}
        ).json()["id"]

        client, csrf = login("shop1", "pw123")
        r = client.post("/place/card_info", json={"csrf_token": csrf, "card": card_id})
        assert r.status_code == 200, r.text
        card = r.json()
        assert card["id"] == card_id
        assert card["name"] == "Anna Ivanova"
        assert card["balance"] == 36000
        assert card["discount_percent"] == 15
        assert card["count"] == 0
        assert card["gender"] == "female"

    def test_unknown_card(self, login):
        client, csrf = login("shop1", "pw123")
        r = client.post("/place/card_info", json={"csrf_token": csrf, "card": 12345})
        assert r.status_code == 404

    def test_card_report_requires_csrf(self, login):
        client, _ = login("shop1", "pw123")
        r = client.post("/place/card_info", json={"csrf_token": "", "card": 1})
        assert r.status_code == 403

    def test_card_number_out_of_range(self, login):
        client, csrf = login("shop1", "pw123")
        r = client.post("/place/card_info", json={"csrf_token": csrf, "card": 10**19})
        assert r.status_code == 422


class TestConcurrentIssue:
    N = 24

    def test_concurrent_issue_gives_distinct_ids(self, db_conn):
        def issue(i: int) -> int:
            with db_conn.get_session() as session:
                card = CardService(CardRepository(session)).create(
                    CardCreateSchema(name=f"holder {i}", gender="m")
                )
                return card.id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(issue, range(self.N)))

        assert len(set(ids)) == self.N
        # nothing else inserts cards in this database
        assert sorted(ids) == list(range(min(ids), min(ids) + self.N))

    def test_issue_not_blocked_by_login_in_progress(self, db_conn):
        def issue() -> int:
            with db_conn.get_session() as session:
                card = CardService(CardRepository(session)).create(
                    CardCreateSchema(name="late holder", gender="f")
                )
                return card.id

        # a login reads the credential, then spends its time hashing
        with db_conn.get_session() as reader:
            PlaceRepository(reader).get_credential("shop1")
            assert reader.in_transaction()
            with ThreadPoolExecutor(max_workers=1) as pool:
                card_id = pool.submit(issue).result(timeout=5)
        assert card_id > 0
