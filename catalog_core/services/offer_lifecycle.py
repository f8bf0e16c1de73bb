"""
Offer lifecycle classification.

An offer's effective status is never stored; it is computed on every read
from the administrative ``is_active`` flag, its window and "now". The
administrative flag dominates, so a disabled offer reads ``inactive`` even
after its window has passed.
"""
from datetime import datetime

from catalog_core.core.clock import ensure_utc
from catalog_core.schemas.offer import OfferState, RemainingTime


def classify(offer, now: datetime) -> OfferState:
    """Classify an offer (anything with is_active/start_date/end_date) at ``now``"""
    if not offer.is_active:
        return OfferState.INACTIVE

    now = ensure_utc(now)
    if now > ensure_utc(offer.end_date):
        return OfferState.EXPIRED
    if now < ensure_utc(offer.start_date):
        return OfferState.SCHEDULED
    return OfferState.ACTIVE


def is_offer_active(offer, now: datetime) -> bool:
    return classify(offer, now) == OfferState.ACTIVE


def remaining_time(offer, now: datetime) -> RemainingTime:
    """Whole days, hours and minutes left until ``offer.end_date``"""
    diff = ensure_utc(offer.end_date) - ensure_utc(now)
    if diff.total_seconds() <= 0:
        return RemainingTime(days=0, hours=0, minutes=0, is_expired=True)

    return RemainingTime(
        days=diff.days,
        hours=diff.seconds // 3600,
        minutes=(diff.seconds % 3600) // 60,
        is_expired=False,
    )
