# catalog_core/db/models/store.py
from sqlalchemy import Column, String, Uuid, DateTime, func
from sqlalchemy.orm import relationship
from catalog_core.db.base import Base
import uuid


class Store(Base):
    """
    Store model. ``owner_user_id`` is the user allowed to manage its offers.
    """

    __tablename__ = "stores"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    owner_user_id = Column(
        Uuid(as_uuid=True), nullable=False, index=True, comment="Owning vendor user"
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    offers = relationship("Offer", back_populates="store")

    def __repr__(self):
        return f"<Store(id={self.id}, owner_user_id={self.owner_user_id})>"
