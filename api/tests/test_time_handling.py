"""
Tests for UTC normalization helpers and the UTCDateTime column type.
"""
from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import ValidationError
from app.models.column_types import UTCDateTime
from app.services import due_service
from app.utils.time_utils import ensure_utc, utc_now

PLUS_TWO = timezone(timedelta(hours=2))


class TestEnsureUtc:
    def test_none_passes_through(self):
        assert ensure_utc(None) is None

    def test_naive_is_taken_as_utc(self):
        value = ensure_utc(datetime(2024, 1, 1, 10, 0))
        assert value == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(0)

    def test_offset_is_converted(self):
        value = ensure_utc(datetime(2024, 1, 1, 12, 0, tzinfo=PLUS_TWO))
        assert value.hour == 10
        assert value.utcoffset() == timedelta(0)

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo is not None


class TestUTCDateTime:
    def test_bind_converts_to_utc(self):
        column_type = UTCDateTime()
        value = column_type.process_bind_param(datetime(2024, 1, 1, 12, 0, tzinfo=PLUS_TWO), None)
        assert value == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(0)

    def test_result_from_naive_is_aware(self):
        value = UTCDateTime().process_result_value(datetime(2024, 1, 1, 10, 0), None)
        assert value.tzinfo is not None

    def test_result_from_string(self):
        value = UTCDateTime().process_result_value("2024-01-01 10:00:00.000000", None)
        assert value == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_none(self):
        assert UTCDateTime().process_bind_param(None, None) is None
        assert UTCDateTime().process_result_value(None, None) is None


class TestResolveDueQueryDefaults:
    def test_cutoff_defaults_to_now(self):
        before = utc_now()
        cutoff = due_service.resolve_cutoff()
        assert before <= cutoff <= utc_now()

    def test_naive_cutoff_is_utc(self):
        assert due_service.resolve_cutoff(datetime(2024, 1, 1)).tzinfo is not None

    def test_limit_default(self, monkeypatch):
        monkeypatch.setattr(due_service.settings, "default_new_cards_limit", 7)
        assert due_service.resolve_new_card_limit() == 7

    def test_limit_is_capped(self, monkeypatch):
        monkeypatch.setattr(due_service.settings, "max_new_cards_page", 10)
        assert due_service.resolve_new_card_limit(500) == 10
        assert due_service.resolve_new_card_limit(10) == 10
        assert due_service.resolve_new_card_limit(3) == 3

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_is_rejected(self, limit):
        with pytest.raises(ValidationError):
            due_service.resolve_new_card_limit(limit)
