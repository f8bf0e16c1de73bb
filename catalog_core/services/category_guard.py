# catalog_core/services/category_guard.py
import logging
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from catalog_core.core.results import Approved, ErrorCode, GuardResult, Rejected
from catalog_core.schemas.category import CategoryCreate, CategoryRecord, CategoryUpdate
from catalog_core.services.category_cycles import would_create_cycle

logger = logging.getLogger(__name__)


class CategoryGuard:
    """
    Validates category mutations against a flat snapshot of all categories.

    The snapshot must be re-read before every mutation; nothing is cached
    between calls.
    """

    def check_create(
        self, payload: CategoryCreate, categories: Iterable[CategoryRecord]
    ) -> GuardResult[CategoryRecord]:
        """Approve a new category; the approved record carries a fresh ID"""
        categories = list(categories)

        rejection = self._check_slug(payload.slug, categories)
        if rejection:
            return rejection

        if payload.parent_id is not None and self._find(payload.parent_id, categories) is None:
            return Rejected(
                ErrorCode.PARENT_NOT_FOUND,
                f"Parent category {payload.parent_id} not found",
            )

        record = CategoryRecord(id=uuid4(), product_count=0, **payload.model_dump())
        return Approved(record)

    def check_update(
        self,
        category_id: UUID,
        patch: CategoryUpdate,
        categories: Iterable[CategoryRecord],
    ) -> GuardResult[CategoryRecord]:
        """Approve a patch; the approved value is the merged record"""
        categories = list(categories)
        current = self._find(category_id, categories)
        if current is None:
            return Rejected(ErrorCode.NOT_FOUND, f"Category {category_id} not found")

        changes = patch.model_dump(exclude_unset=True)
        if changes.get("slug") is None:
            changes.pop("slug", None)
        if changes.get("name") is None:
            changes.pop("name", None)

        if "slug" in changes and changes["slug"] != current.slug:
            rejection = self._check_slug(changes["slug"], categories, exclude_id=category_id)
            if rejection:
                return rejection

        if "parent_id" in changes and changes["parent_id"] != current.parent_id:
            parent_id = changes["parent_id"]
            if parent_id is not None and self._find(parent_id, categories) is None:
                return Rejected(
                    ErrorCode.PARENT_NOT_FOUND, f"Parent category {parent_id} not found"
                )
            if would_create_cycle(category_id, parent_id, categories):
                return Rejected(
                    ErrorCode.CIRCULAR_REFERENCE,
                    f"Category {current.slug!r} cannot be moved under its own subtree",
                )

        return Approved(current.model_copy(update=changes))

    def check_delete(
        self, category_id: UUID, categories: Iterable[CategoryRecord]
    ) -> GuardResult[CategoryRecord]:
        """Approve deletion of a category with no products and no children"""
        categories = list(categories)
        current = self._find(category_id, categories)
        if current is None:
            return Rejected(ErrorCode.NOT_FOUND, f"Category {category_id} not found")

        if current.product_count > 0:
            return Rejected(
                ErrorCode.HAS_PRODUCTS,
                f"Cannot delete category with products ({current.product_count})",
            )

        children = sum(1 for category in categories if category.parent_id == category_id)
        if children > 0:
            return Rejected(
                ErrorCode.HAS_CHILDREN,
                f"Cannot delete category with subcategories ({children})",
            )

        return Approved(current)

    def can_delete(self, category_id: UUID, categories: Iterable[CategoryRecord]) -> bool:
        return self.check_delete(category_id, categories).ok

    @staticmethod
    def _find(category_id: UUID, categories: List[CategoryRecord]) -> Optional[CategoryRecord]:
        return next((c for c in categories if c.id == category_id), None)

    @staticmethod
    def _check_slug(
        slug: str, categories: List[CategoryRecord], exclude_id: Optional[UUID] = None
    ) -> Optional[Rejected]:
        wanted = slug.casefold()
        for category in categories:
            if category.id != exclude_id and category.slug.casefold() == wanted:
                logger.debug("Slug %s collides with category %s", slug, category.id)
                return Rejected(
                    ErrorCode.DUPLICATE_SLUG,
                    f"Category with slug '{slug}' already exists",
                )
        return None
