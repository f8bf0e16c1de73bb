# catalog_core/db/repositories/store_repository.py
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from catalog_core.db.models.store import Store


class StoreRepository:
    """Repository for Store lookups"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_owner_id(self, store_id: UUID) -> Optional[UUID]:
        """Owning user of a store, None if the store does not exist"""
        row = (
            self.db_session.query(Store.owner_user_id)
            .filter(Store.id == store_id)
            .first()
        )
        return row[0] if row else None

    def create(self, name: str, owner_user_id: UUID) -> Store:
        """Create a new store"""
        db_store = Store(name=name, owner_user_id=owner_user_id)

        self.db_session.add(db_store)
        self.db_session.commit()
        self.db_session.refresh(db_store)

        return db_store
