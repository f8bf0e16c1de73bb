# catalog_core/db/models/offer.py
from sqlalchemy import (
    Column,
    String,
    ForeignKey,
    Uuid,
    Numeric,
    Integer,
    Boolean,
    DateTime,
    func,
)
from sqlalchemy.orm import relationship
from catalog_core.db.base import Base
import uuid


class Offer(Base):
    """
    Offer model: a time-bounded discount on a product published by a store.
    Its effective status is computed on read, never stored.
    """

    __tablename__ = "offers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    store_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Store publishing the offer",
    )
    title = Column(String)

    # Pricing information
    original_price = Column(Numeric(10, 2), nullable=False, comment="Price before discount")
    discounted_price = Column(Numeric(10, 2), nullable=False, comment="Price after discount")
    discount_percent = Column(Integer, nullable=False, comment="Derived from the two prices")

    # Validity window
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    product = relationship("Product", back_populates="offers")
    store = relationship("Store", back_populates="offers")

    def __repr__(self):
        return f"<Offer(id={self.id}, discounted_price={self.discounted_price}, store_id={self.store_id})>"
