"""
Tests for the card state endpoints: round-trip, full overwrite, due and new queries.
"""
import json

from app.core.config import settings
from factories import T0, ONE_DAY, parse_instant, card_state_payload, new_card_payload


def put_card(client, card_id, payload):
    response = client.put(f"/api/v1/card-states/{card_id}", json=payload)
    assert response.status_code == 200, response.text
    assert response.json() == {"ok": True}


class TestGetAndUpsert:
    def test_get_absent_returns_null(self, client):
        response = client.get("/api/v1/card-states/never-seen")
        assert response.status_code == 200
        assert response.json() is None

    def test_round_trip_returns_exact_fields(self, client):
        blob = json.dumps({"due": "2024-01-02T10:00:00.000Z", "note": "ünïcødé", "w": [0.4, 1.2]})
        payload = card_state_payload(T0 + ONE_DAY, state=2, reps=4, lapses=1, scheduler_blob=blob)
        put_card(client, "C1", payload)

        body = client.get("/api/v1/card-states/C1").json()
        assert body["card_id"] == "C1"
        assert parse_instant(body["due"]) == T0 + ONE_DAY
        assert parse_instant(body["last_review"]) == T0
        assert body["stability"] == payload["stability"]
        assert body["difficulty"] == payload["difficulty"]
        assert body["elapsed_days"] == 0
        assert body["scheduled_days"] == 1
        assert body["reps"] == 4
        assert body["lapses"] == 1
        assert body["state"] == 2
        assert body["scheduler_blob"] == blob

    def test_upsert_overwrites_every_field(self, client):
        put_card(client, "C1", card_state_payload(T0 + ONE_DAY, state=1, reps=1, scheduler_blob="first"))
        put_card(client, "C1", card_state_payload(T0 + 3 * ONE_DAY, state=2, reps=2, stability=9.5, scheduler_blob=None))

        body = client.get("/api/v1/card-states/C1").json()
        assert parse_instant(body["due"]) == T0 + 3 * ONE_DAY
        assert body["state"] == 2
        assert body["reps"] == 2
        assert body["stability"] == 9.5
        assert body["scheduler_blob"] is None

    def test_upsert_is_idempotent(self, client):
        payload = card_state_payload(T0 + ONE_DAY, scheduler_blob="snapshot")
        put_card(client, "C1", payload)
        first = client.get("/api/v1/card-states").json()
        put_card(client, "C1", payload)
        second = client.get("/api/v1/card-states").json()
        assert first == second
        assert len(second) == 1

    def test_new_state_with_reps_is_rejected(self, client):
        payload = card_state_payload(T0, state=0, reps=1, last_review=None)
        response = client.put("/api/v1/card-states/C1", json=payload)
        assert response.status_code == 422
        assert client.get("/api/v1/card-states/C1").json() is None

    def test_new_state_with_last_review_is_rejected(self, client):
        payload = card_state_payload(T0, state=0, reps=0, last_review=T0)
        response = client.put("/api/v1/card-states/C1", json=payload)
        assert response.status_code == 422

    def test_naive_timestamp_is_rejected(self, client):
        payload = card_state_payload(T0 + ONE_DAY)
        payload["due"] = "2024-01-02T10:00:00"
        response = client.put("/api/v1/card-states/C1", json=payload)
        assert response.status_code == 422

    def test_state_out_of_range_is_rejected(self, client):
        payload = card_state_payload(T0 + ONE_DAY, state=7)
        response = client.put("/api/v1/card-states/C1", json=payload)
        assert response.status_code == 422

    def test_card_states_are_isolated_per_user(self, client):
        put_card(client, "C1", card_state_payload(T0 + ONE_DAY))
        other = client.get("/api/v1/card-states/C1", headers={"X-User-Id": "U2"})
        assert other.json() is None

    def test_card_id_longer_than_255_is_rejected(self, client):
        card_id = "c" * 256
        response = client.put(f"/api/v1/card-states/{card_id}", json=card_state_payload(T0 + ONE_DAY))
        assert response.status_code == 422
        assert client.get("/api/v1/card-states").json() == []
        assert client.get(f"/api/v1/card-states/{'c' * 255}").status_code == 200


class TestListAll:
    def test_ordered_by_due_ascending(self, client):
        put_card(client, "late", card_state_payload(T0 + 5 * ONE_DAY))
        put_card(client, "early", card_state_payload(T0 + ONE_DAY))
        put_card(client, "new", new_card_payload(T0 + 2 * ONE_DAY))

        ids = [row["card_id"] for row in client.get("/api/v1/card-states").json()]
        assert ids == ["early", "new", "late"]


class TestDue:
    def seed(self, client):
        put_card(client, "review-past", card_state_payload(T0 - ONE_DAY, state=2, reps=3))
        put_card(client, "learning-now", card_state_payload(T0, state=1))
        put_card(client, "relearning-future", card_state_payload(T0 + ONE_DAY, state=3, reps=5, lapses=1))
        put_card(client, "new-past", new_card_payload(T0 - 2 * ONE_DAY))

    def test_due_list_excludes_new_and_future(self, client):
        self.seed(client)
        rows = client.get("/api/v1/card-states/due", params={"cutoff": T0.isoformat()}).json()
        assert [row["card_id"] for row in rows] == ["review-past", "learning-now"]
        for row in rows:
            assert row["state"] != 0
            assert parse_instant(row["due"]) <= T0

    def test_count_matches_list(self, client):
        self.seed(client)
        for cutoff in (T0 - 3 * ONE_DAY, T0, T0 + ONE_DAY):
            listed = client.get("/api/v1/card-states/due", params={"cutoff": cutoff.isoformat()}).json()
            counted = client.get("/api/v1/card-states/count-due", params={"cutoff": cutoff.isoformat()}).json()
            assert counted == {"count": len(listed)}

    def test_count_without_cutoff_uses_now(self, client):
        self.seed(client)
        # T0 is in the past, so everything except New is due now
        assert client.get("/api/v1/card-states/count-due").json() == {"count": 3}

    def test_naive_cutoff_is_read_as_utc(self, client):
        self.seed(client)
        rows = client.get("/api/v1/card-states/due", params={"cutoff": "2024-01-01T10:00:00"}).json()
        assert [row["card_id"] for row in rows] == ["review-past", "learning-now"]

    def test_cutoff_with_offset(self, client):
        self.seed(client)
        # 11:00+01:00 is 10:00 UTC
        rows = client.get("/api/v1/card-states/due", params={"cutoff": "2024-01-01T11:00:00+01:00"}).json()
        assert [row["card_id"] for row in rows] == ["review-past", "learning-now"]


class TestNew:
    def seed(self, client, count=5):
        for index in reversed(range(count)):
            put_card(client, f"C{index}", new_card_payload())
        put_card(client, "seen", card_state_payload(T0))

    def test_returns_at_most_limit_new_cards_in_card_id_order(self, client):
        self.seed(client)
        rows = client.get("/api/v1/card-states/new", params={"limit": 3}).json()
        assert [row["card_id"] for row in rows] == ["C0", "C1", "C2"]
        assert all(row["state"] == 0 for row in rows)

    def test_repeated_calls_return_same_page(self, client):
        self.seed(client)
        first = client.get("/api/v1/card-states/new", params={"limit": 2}).json()
        second = client.get("/api/v1/card-states/new", params={"limit": 2}).json()
        assert first == second

    def test_default_limit(self, client, monkeypatch):
        monkeypatch.setattr(settings, "default_new_cards_limit", 4)
        self.seed(client, count=6)
        rows = client.get("/api/v1/card-states/new").json()
        assert len(rows) == 4

    def test_limit_is_capped(self, client, monkeypatch):
        monkeypatch.setattr(settings, "max_new_cards_page", 2)
        self.seed(client)
        rows = client.get("/api/v1/card-states/new", params={"limit": 50}).json()
        assert len(rows) == 2

    def test_non_positive_limit_is_rejected(self, client):
        response = client.get("/api/v1/card-states/new", params={"limit": 0})
        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"
