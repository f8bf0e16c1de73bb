# tests/services/test_offer_lifecycle.py
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from catalog_core.schemas.offer import OfferState
from catalog_core.services.offer_lifecycle import classify, is_offer_active, remaining_time

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_offer(start_offset_days, end_offset_days, is_active=True):
    return SimpleNamespace(
        is_active=is_active,
        start_date=NOW + timedelta(days=start_offset_days),
        end_date=NOW + timedelta(days=end_offset_days),
    )


def test_disabled_offer_is_inactive_regardless_of_window():
    assert classify(make_offer(-5, 5, is_active=False), NOW) == OfferState.INACTIVE
    assert classify(make_offer(-10, -5, is_active=False), NOW) == OfferState.INACTIVE
    assert classify(make_offer(5, 10, is_active=False), NOW) == OfferState.INACTIVE


def test_future_window_is_scheduled():
    assert classify(make_offer(1, 10), NOW) == OfferState.SCHEDULED


def test_past_window_is_expired():
    assert classify(make_offer(-10, -1), NOW) == OfferState.EXPIRED


def test_running_window_is_active():
    offer = make_offer(-1, 1)
    assert classify(offer, NOW) == OfferState.ACTIVE
    assert is_offer_active(offer, NOW)


def test_window_bounds_are_inclusive():
    assert classify(make_offer(0, 3), NOW) == OfferState.ACTIVE
    assert classify(make_offer(-3, 0), NOW) == OfferState.ACTIVE


def test_naive_dates_are_treated_as_utc():
    offer = SimpleNamespace(
        is_active=True,
        start_date=datetime(2026, 3, 1),
        end_date=datetime(2026, 3, 31),
    )
    assert classify(offer, NOW) == OfferState.ACTIVE


def test_remaining_time_buckets():
    offer = SimpleNamespace(end_date=NOW + timedelta(days=2, hours=5, minutes=30, seconds=59))
    remaining = remaining_time(offer, NOW)
    assert (remaining.days, remaining.hours, remaining.minutes) == (2, 5, 30)
    assert remaining.is_expired is False


def test_remaining_time_when_expired():
    for end in (NOW, NOW - timedelta(minutes=1)):
        remaining = remaining_time(SimpleNamespace(end_date=end), NOW)
        assert (remaining.days, remaining.hours, remaining.minutes) == (0, 0, 0)
        assert remaining.is_expired is True
