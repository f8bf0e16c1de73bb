# catalog_core/db/repositories/product_repository.py
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from catalog_core.db.models.product import Product


class ProductRepository:
    """Repository for Product lookups"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def exists(self, product_id: UUID) -> bool:
        return (
            self.db_session.query(Product.id).filter(Product.id == product_id).first()
            is not None
        )

    def create(self, name: str, category_id: Optional[UUID] = None) -> Product:
        """Create a new product"""
        db_product = Product(name=name, category_id=category_id)

        self.db_session.add(db_product)
        self.db_session.commit()
        self.db_session.refresh(db_product)

        return db_product
