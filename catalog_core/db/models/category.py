# catalog_core/db/models/category.py
from sqlalchemy import Column, String, Text, Uuid, ForeignKey, DateTime, func
from catalog_core.db.base import Base
import uuid


class Category(Base):
    """
    Category model: one node of the catalog taxonomy.

    ``parent_id`` references another category; deleting a parent never
    cascades to its children.
    """

    __tablename__ = "categories"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    slug = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    image_url = Column(String)
    parent_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"
