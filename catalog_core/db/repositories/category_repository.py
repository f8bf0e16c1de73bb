# catalog_core/db/repositories/category_repository.py
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session
from catalog_core.db.models.category import Category
from catalog_core.db.models.product import Product
from catalog_core.schemas.category import CategoryRecord


class CategoryRepository:
    """Repository for CRUD operations on Category model"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_by_id(self, category_id: UUID) -> Optional[Category]:
        """Get category by ID"""
        return self.db_session.query(Category).filter(Category.id == category_id).first()

    def get_by_slug(self, slug: str) -> Optional[Category]:
        """Get category by slug (case-insensitive)"""
        if not slug:
            return None
        return (
            self.db_session.query(Category)
            .filter(func.lower(Category.slug) == slug.strip().lower())
            .first()
        )

    def list_with_product_counts(self) -> List[Tuple[Category, int]]:
        """Full flat snapshot of categories with their linked product counts"""
        return (
            self.db_session.query(Category, func.count(Product.id))
            .outerjoin(Product, Product.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.created_at, Category.slug)
            .all()
        )

    def product_count(self, category_id: UUID) -> int:
        return (
            self.db_session.query(func.count(Product.id))
            .filter(Product.category_id == category_id)
            .scalar()
        )

    def create(self, record: CategoryRecord) -> Category:
        """Insert an approved category record"""
        db_category = Category(**record.model_dump(exclude={"product_count"}))

        self.db_session.add(db_category)
        self.db_session.commit()
        self.db_session.refresh(db_category)

        return db_category

    def update(self, category_id: UUID, values: Dict[str, Any]) -> Optional[Category]:
        """Update an existing category"""
        db_category = self.get_by_id(category_id)

        if not db_category:
            return None

        for key, value in values.items():
            setattr(db_category, key, value)

        self.db_session.commit()
        self.db_session.refresh(db_category)

        return db_category

    def delete(self, category_id: UUID) -> bool:
        """Delete a category by ID"""
        db_category = self.get_by_id(category_id)

        if not db_category:
            return False

        self.db_session.delete(db_category)
        self.db_session.commit()

        return True
