"""
Tests for user settings: get-or-create defaults and partial updates.
"""
from unittest.mock import patch

from sqlmodel import Session, select, func

from app.models.user_settings import UserSettings, DEFAULT_USER_SETTINGS
from app.services.settings_service import get_or_create_user_settings


def settings_rows(engine, user_id):
    with Session(engine) as session:
        return session.exec(
            select(func.count()).select_from(UserSettings).where(UserSettings.user_id == user_id)
        ).one()


class TestGetSettings:
    def test_new_user_gets_defaults(self, client):
        response = client.get("/api/v1/settings")
        assert response.status_code == 200
        assert response.json() == {
            "theme": "system",
            "daily_review_goal": 50,
            "new_cards_per_day": 20,
            "font_size": "medium",
            "reduced_motion": False,
            "desired_retention": 0.9,
        }

    def test_second_call_returns_same_row(self, client, engine):
        first = client.get("/api/v1/settings").json()
        second = client.get("/api/v1/settings").json()
        assert first == second
        assert settings_rows(engine, "U1") == 1

    def test_get_or_create_across_sessions_creates_one_row(self, engine):
        with Session(engine) as first_session, Session(engine) as second_session:
            first = get_or_create_user_settings(first_session, "U9")
            second = get_or_create_user_settings(second_session, "U9")
            assert first.user_id == second.user_id == "U9"
        assert settings_rows(engine, "U9") == 1

    def test_first_access_losing_the_race_reads_the_winning_row(self, engine):
        with Session(engine) as winner, Session(engine) as loser:
            real_get = loser.get
            lookups = []

            def get_missing_once(*args, **kwargs):
                lookups.append(args)
                if len(lookups) == 1:
                    winner.add(UserSettings(user_id="U5", daily_review_goal=77))
                    winner.commit()
                    return None
                return real_get(*args, **kwargs)

            with patch.object(loser, "get", side_effect=get_missing_once):
                user_settings = get_or_create_user_settings(loser, "U5")

            assert len(lookups) == 2
            assert user_settings.daily_review_goal == 77
        assert settings_rows(engine, "U5") == 1

    def test_existing_row_is_not_overwritten(self, session):
        session.add(UserSettings(user_id="U3", daily_review_goal=120))
        session.commit()

        user_settings = get_or_create_user_settings(session, "U3")
        assert user_settings.daily_review_goal == 120
        assert user_settings.theme == DEFAULT_USER_SETTINGS["theme"]


class TestUpdateSettings:
    def test_partial_update_keeps_other_fields(self, client):
        client.put("/api/v1/settings", json={"theme": "dark"})
        response = client.put("/api/v1/settings", json={"daily_review_goal": 80})
        assert response.status_code == 200
        body = response.json()
        assert body["daily_review_goal"] == 80
        assert body["theme"] == "dark"
        assert body["new_cards_per_day"] == 20

    def test_null_does_not_overwrite(self, client):
        client.put("/api/v1/settings", json={"font_size": "large"})
        body = client.put("/api/v1/settings", json={"font_size": None, "reduced_motion": True}).json()
        assert body["font_size"] == "large"
        assert body["reduced_motion"] is True

    def test_update_creates_row_when_missing(self, client, engine):
        body = client.put("/api/v1/settings", json={"desired_retention": 0.85}).json()
        assert body["desired_retention"] == 0.85
        assert body["daily_review_goal"] == 50
        assert settings_rows(engine, "U1") == 1

    def test_out_of_range_retention_is_rejected(self, client):
        response = client.put("/api/v1/settings", json={"desired_retention": 0.5})
        assert response.status_code == 422

    def test_unknown_theme_is_rejected(self, client):
        response = client.put("/api/v1/settings", json={"theme": "sepia"})
        assert response.status_code == 422
