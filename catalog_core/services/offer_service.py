# catalog_core/services/offer_service.py
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from catalog_core.core.clock import Clock, utc_now
from catalog_core.core.logging import get_logger
from catalog_core.core.results import Approved, GuardResult
from catalog_core.db.repositories.offer_directory import SqlOfferDirectory
from catalog_core.db.repositories.offer_repository import OfferRepository
from catalog_core.schemas.actor import Actor
from catalog_core.schemas.offer import (
    OfferCreate,
    OfferRecord,
    OfferState,
    OfferUpdate,
    RemainingTime,
)
from catalog_core.services.offer_guard import OfferGuard
from catalog_core.services.offer_lifecycle import classify, remaining_time

logger = get_logger(__name__)


@dataclass
class OfferStatus:
    """Effective status of an offer at the moment it was read"""
    offer: OfferRecord
    state: OfferState
    remaining: RemainingTime


class OfferService:
    """Service for offer-related business logic"""

    def __init__(self, db_session, clock: Clock = utc_now, guard: Optional[OfferGuard] = None):
        self.offer_repo = OfferRepository(db_session)
        self.guard = guard or OfferGuard(SqlOfferDirectory(db_session))
        self.clock = clock

    def get_offer(self, offer_id: UUID) -> Optional[OfferRecord]:
        """Get offer by ID"""
        offer = self.offer_repo.get_by_id(offer_id)
        if not offer:
            return None
        return OfferRecord.model_validate(offer)

    def get_offer_status(self, offer_id: UUID) -> Optional[OfferStatus]:
        """Classify an offer against the injected clock"""
        offer = self.get_offer(offer_id)
        if offer is None:
            return None
        now = self.clock()
        return OfferStatus(
            offer=offer, state=classify(offer, now), remaining=remaining_time(offer, now)
        )

    def list_active_offers_for_product(self, product_id: UUID) -> List[OfferRecord]:
        """Offers currently running for a product, cheapest first"""
        now = self.clock()
        offers = [OfferRecord.model_validate(o) for o in self.offer_repo.list_by_product(product_id)]
        return [o for o in offers if classify(o, now) == OfferState.ACTIVE]

    def create_offer(self, actor: Actor, offer_data: OfferCreate) -> GuardResult[OfferRecord]:
        """Create a new offer for a store the actor owns"""
        verdict = self.guard.check_create(actor, offer_data)
        if not verdict.ok:
            logger.warning(
                f"Rejected offer create by {actor.id}: {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        offer = self.offer_repo.create(verdict.value)
        logger.info(
            f"Created offer {offer.id} for product {offer.product_id} in store {offer.store_id}"
        )
        return Approved(OfferRecord.model_validate(offer))

    def update_offer(
        self, actor: Actor, offer_id: UUID, offer_data: OfferUpdate
    ) -> GuardResult[OfferRecord]:
        """Update an existing offer"""
        verdict = self.guard.check_update(actor, offer_id, offer_data)
        if not verdict.ok:
            logger.warning(
                f"Rejected offer update {offer_id} by {actor.id}: {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        values = verdict.value.model_dump(exclude={"id", "product_id", "store_id"})
        offer = self.offer_repo.update(offer_id, values)
        logger.info(f"Updated offer {offer_id}")
        return Approved(OfferRecord.model_validate(offer))

    def delete_offer(self, actor: Actor, offer_id: UUID) -> GuardResult[OfferRecord]:
        """Delete an offer; only its store owner (or an admin) may do so"""
        verdict = self.guard.check_delete(actor, offer_id)
        if not verdict.ok:
            logger.warning(
                f"Rejected offer delete {offer_id} by {actor.id}: {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        self.offer_repo.delete(offer_id)
        logger.info(f"Deleted offer {offer_id}")
        return verdict
