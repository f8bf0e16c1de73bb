# catalog_core/services/offer_guard.py
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from catalog_core.core.config import settings
from catalog_core.core.results import Approved, ErrorCode, GuardResult, Rejected
from catalog_core.schemas.actor import Actor
from catalog_core.schemas.offer import OfferCreate, OfferDraft, OfferRecord, OfferUpdate
from catalog_core.services.discount_calculator import percent_from_prices

logger = logging.getLogger(__name__)


class OfferDirectory(ABC):
    """Read-only lookups the offer guard needs from storage."""

    @abstractmethod
    def get_store_owner(self, store_id: UUID) -> Optional[UUID]:
        """Owning user of a store, or None if the store does not exist"""
        pass

    @abstractmethod
    def product_exists(self, product_id: UUID) -> bool:
        pass

    @abstractmethod
    def get_offer(self, offer_id: UUID) -> Optional[OfferRecord]:
        pass


def validate_offer_prices(original_price: Decimal, discounted_price: Decimal) -> List[str]:
    """Human readable problems with a price pair; empty when valid"""
    errors = []
    if original_price <= 0:
        errors.append("Original price must be greater than 0")
    if discounted_price <= 0:
        errors.append("Discounted price must be greater than 0")
    if discounted_price >= original_price:
        errors.append("Discounted price must be less than original price")
    return errors


def validate_offer_dates(
    start_date: datetime,
    end_date: datetime,
    enforce_bounds: bool = True,
    min_days: int = 1,
    max_days: int = 365,
) -> List[str]:
    """Human readable problems with an offer window; empty when valid"""
    if end_date <= start_date:
        return ["End date must be after start date"]

    errors = []
    if enforce_bounds:
        duration = end_date - start_date
        if duration < timedelta(days=min_days):
            errors.append(f"Offer duration must be at least {min_days} day(s)")
        if duration > timedelta(days=max_days):
            errors.append(f"Offer duration cannot exceed {max_days} days")
    return errors


class OfferGuard:
    """
    Validates offer mutations and enforces store ownership.

    Prices are the source of truth for ``discount_percent``: any
    client-supplied percentage is replaced by the one derived from prices.
    """

    def __init__(
        self,
        directory: OfferDirectory,
        enforce_duration_bounds: Optional[bool] = None,
        min_duration_days: Optional[int] = None,
        max_duration_days: Optional[int] = None,
    ):
        self.directory = directory
        self.enforce_duration_bounds = (
            settings.OFFER_ENFORCE_DURATION_BOUNDS
            if enforce_duration_bounds is None
            else enforce_duration_bounds
        )
        self.min_duration_days = (
            settings.OFFER_MIN_DURATION_DAYS if min_duration_days is None else min_duration_days
        )
        self.max_duration_days = (
            settings.OFFER_MAX_DURATION_DAYS if max_duration_days is None else max_duration_days
        )

    def check_create(self, actor: Actor, payload: OfferCreate) -> GuardResult[OfferDraft]:
        rejection = self._check_ownership(actor, payload.store_id)
        if rejection:
            return rejection

        if not self.directory.product_exists(payload.product_id):
            return Rejected(ErrorCode.NOT_FOUND, f"Product {payload.product_id} not found")

        rejection = self._check_prices(payload.original_price, payload.discounted_price)
        if rejection:
            return rejection

        rejection = self._check_dates(payload.start_date, payload.end_date)
        if rejection:
            return rejection

        if payload.discount_percent is not None:
            logger.debug("Ignoring client-supplied discount_percent=%s", payload.discount_percent)

        draft = OfferDraft(
            **payload.model_dump(exclude={"discount_percent"}),
            discount_percent=percent_from_prices(
                payload.original_price, payload.discounted_price
            ),
        )
        return Approved(draft)

    def check_update(
        self, actor: Actor, offer_id: UUID, patch: OfferUpdate
    ) -> GuardResult[OfferRecord]:
        """Approve a patch; ownership is checked against the stored store"""
        offer = self.directory.get_offer(offer_id)
        if offer is None:
            return Rejected(ErrorCode.NOT_FOUND, f"Offer {offer_id} not found")

        rejection = self._check_ownership(actor, offer.store_id)
        if rejection:
            return rejection

        changes = {
            key: value
            for key, value in patch.model_dump(exclude_unset=True).items()
            if value is not None or key == "title"
        }
        changes.pop("discount_percent", None)

        if "original_price" in changes or "discounted_price" in changes:
            original = changes.get("original_price", offer.original_price)
            discounted = changes.get("discounted_price", offer.discounted_price)
            rejection = self._check_prices(original, discounted)
            if rejection:
                return rejection
            changes["discount_percent"] = percent_from_prices(original, discounted)

        if "start_date" in changes or "end_date" in changes:
            rejection = self._check_dates(
                changes.get("start_date", offer.start_date),
                changes.get("end_date", offer.end_date),
            )
            if rejection:
                return rejection

        return Approved(offer.model_copy(update=changes))

    def check_delete(self, actor: Actor, offer_id: UUID) -> GuardResult[OfferRecord]:
        offer = self.directory.get_offer(offer_id)
        if offer is None:
            return Rejected(ErrorCode.NOT_FOUND, f"Offer {offer_id} not found")

        rejection = self._check_ownership(actor, offer.store_id)
        if rejection:
            return rejection
        return Approved(offer)

    def _check_ownership(self, actor: Actor, store_id: UUID) -> Optional[Rejected]:
        owner_id = self.directory.get_store_owner(store_id)
        if owner_id is None:
            return Rejected(ErrorCode.NOT_FOUND, f"Store {store_id} not found")
        if owner_id != actor.id and not actor.is_elevated:
            return Rejected(
                ErrorCode.FORBIDDEN, f"Not authorized to manage offers for store {store_id}"
            )
        return None

    def _check_prices(self, original: Decimal, discounted: Decimal) -> Optional[Rejected]:
        errors = validate_offer_prices(original, discounted)
        if errors:
            return Rejected(ErrorCode.INVALID_PRICE, "; ".join(errors))
        return None

    def _check_dates(self, start_date: datetime, end_date: datetime) -> Optional[Rejected]:
        errors = validate_offer_dates(
            start_date,
            end_date,
            enforce_bounds=self.enforce_duration_bounds,
            min_days=self.min_duration_days,
            max_days=self.max_duration_days,
        )
        if errors:
            return Rejected(ErrorCode.INVALID_DATE_RANGE, "; ".join(errors))
        return None
