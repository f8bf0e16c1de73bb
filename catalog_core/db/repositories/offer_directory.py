# catalog_core/db/repositories/offer_directory.py
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session

from catalog_core.db.repositories.offer_repository import OfferRepository
from catalog_core.db.repositories.product_repository import ProductRepository
from catalog_core.db.repositories.store_repository import StoreRepository
from catalog_core.schemas.offer import OfferRecord
from catalog_core.services.offer_guard import OfferDirectory


class SqlOfferDirectory(OfferDirectory):
    """OfferDirectory backed by the SQLAlchemy repositories"""

    def __init__(self, db_session: Session):
        self.store_repo = StoreRepository(db_session)
        self.product_repo = ProductRepository(db_session)
        self.offer_repo = OfferRepository(db_session)

    def get_store_owner(self, store_id: UUID) -> Optional[UUID]:
        return self.store_repo.get_owner_id(store_id)

    def product_exists(self, product_id: UUID) -> bool:
        return self.product_repo.exists(product_id)

    def get_offer(self, offer_id: UUID) -> Optional[OfferRecord]:
        offer = self.offer_repo.get_by_id(offer_id)
        if not offer:
            return None
        return OfferRecord.model_validate(offer)
