# catalog_core/db/models/product.py
from sqlalchemy import Column, String, Uuid, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from catalog_core.db.base import Base
import uuid


class Product(Base):
    """Product model; only the fields the catalog rules read"""

    __tablename__ = "products"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    category_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    offers = relationship("Offer", back_populates="product")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"
