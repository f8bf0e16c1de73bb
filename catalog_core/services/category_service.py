# catalog_core/services/category_service.py
from typing import List, Optional
from uuid import UUID

from catalog_core.core.logging import get_logger
from catalog_core.core.results import Approved, GuardResult
from catalog_core.db.repositories.category_repository import CategoryRepository
from catalog_core.schemas.category import (
    CategoryCreate,
    CategoryNode,
    CategoryRecord,
    CategoryUpdate,
)
from catalog_core.services.category_guard import CategoryGuard
from catalog_core.services.category_tree import build_tree, path_to

logger = get_logger(__name__)


class CategoryService:
    """Service for category-related business logic"""

    def __init__(self, db_session):
        self.category_repo = CategoryRepository(db_session)
        self.guard = CategoryGuard()

    def list_categories(self) -> List[CategoryRecord]:
        """Full flat snapshot, read fresh on every call"""
        return [
            self._to_record(category, count)
            for category, count in self.category_repo.list_with_product_counts()
        ]

    def get_category(self, category_id: UUID) -> Optional[CategoryRecord]:
        """Get category by ID"""
        category = self.category_repo.get_by_id(category_id)
        if not category:
            return None
        return self._to_record(category, self.category_repo.product_count(category_id))

    def get_by_slug(self, slug: str) -> Optional[CategoryRecord]:
        """Get category by slug"""
        category = self.category_repo.get_by_slug(slug)
        if not category:
            return None
        return self._to_record(category, self.category_repo.product_count(category.id))

    def get_tree(self) -> List[CategoryNode]:
        return build_tree(self.list_categories())

    def get_path(self, category_id: UUID) -> List[CategoryRecord]:
        """Breadcrumb from the root to the category"""
        return path_to(category_id, self.list_categories())

    def create_category(self, category_data: CategoryCreate) -> GuardResult[CategoryRecord]:
        """Create a new category"""
        verdict = self.guard.check_create(category_data, self.list_categories())
        if not verdict.ok:
            logger.warning(
                f"Rejected category create '{category_data.slug}': {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        category = self.category_repo.create(verdict.value)
        logger.info(f"Created category {category.id} ('{category.slug}')")
        return Approved(self._to_record(category, 0))

    def update_category(
        self, category_id: UUID, category_data: CategoryUpdate
    ) -> GuardResult[CategoryRecord]:
        """Update an existing category, including reparenting"""
        categories = self.list_categories()
        verdict = self.guard.check_update(category_id, category_data, categories)
        if not verdict.ok:
            logger.warning(
                f"Rejected category update {category_id}: {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        values = verdict.value.model_dump(exclude={"id", "product_count"})
        category = self.category_repo.update(category_id, values)
        logger.info(f"Updated category {category_id}")
        return Approved(self._to_record(category, verdict.value.product_count))

    def delete_category(self, category_id: UUID) -> GuardResult[CategoryRecord]:
        """Delete a category that has neither products nor subcategories"""
        verdict = self.guard.check_delete(category_id, self.list_categories())
        if not verdict.ok:
            logger.warning(
                f"Rejected category delete {category_id}: {verdict.code.value} - {verdict.detail}"
            )
            return verdict

        self.category_repo.delete(category_id)
        logger.info(f"Deleted category {category_id}")
        return verdict

    @staticmethod
    def _to_record(category, product_count: int) -> CategoryRecord:
        return CategoryRecord(
            id=category.id,
            slug=category.slug,
            name=category.name,
            description=category.description,
            image_url=category.image_url,
            parent_id=category.parent_id,
            product_count=product_count,
        )
