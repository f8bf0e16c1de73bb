# catalog_core/db/repositories/offer_repository.py
from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from catalog_core.db.models.offer import Offer
from catalog_core.schemas.offer import OfferDraft


class OfferRepository:
    """Repository for CRUD operations on Offer model"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_by_id(self, offer_id: UUID) -> Optional[Offer]:
        """Get offer by ID"""
        return self.db_session.query(Offer).filter(Offer.id == offer_id).first()

    def list_by_product(self, product_id: UUID) -> List[Offer]:
        """List offers for a specific product, cheapest first"""
        return (
            self.db_session.query(Offer)
            .filter(Offer.product_id == product_id)
            .order_by(Offer.discounted_price)
            .all()
        )

    def create(self, draft: OfferDraft) -> Offer:
        """Insert an approved offer"""
        db_offer = Offer(**draft.model_dump())

        self.db_session.add(db_offer)
        self.db_session.commit()
        self.db_session.refresh(db_offer)

        return db_offer

    def update(self, offer_id: UUID, values: Dict[str, Any]) -> Optional[Offer]:
        """Update an existing offer"""
        db_offer = self.get_by_id(offer_id)

        if not db_offer:
            return None

        for key, value in values.items():
            setattr(db_offer, key, value)

        self.db_session.commit()
        self.db_session.refresh(db_offer)

        return db_offer

    def delete(self, offer_id: UUID) -> bool:
        """Delete an offer by ID"""
        db_offer = self.get_by_id(offer_id)

        if not db_offer:
            return False

        self.db_session.delete(db_offer)
        self.db_session.commit()

        return True
