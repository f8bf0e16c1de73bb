# catalog_core/schemas/category.py
import re
import unicodedata
from uuid import UUID, uuid4
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator, model_validator

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str, fallback_prefix: str = "category") -> str:
    """
    Convert a display name to a URL-safe slug.
    For example: "Phones & Tablets" -> "phones-tablets"

    Text with no ASCII letters or digits falls back to ``<prefix>-<random>``.
    """
    normalized = unicodedata.normalize("NFKD", text or "")
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii").lower()
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text).strip("-")
    if not slug:
        slug = f"{fallback_prefix}-{uuid4().hex[:8]}"
    return slug


def normalize_slug(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    slug = value.strip().lower()
    if not SLUG_PATTERN.match(slug):
        raise ValueError(
            "Slug must use lowercase letters, numbers, or single hyphens"
        )
    return slug


class CategoryFields(BaseModel):
    """Fields shared by category payloads and records"""
    slug: str = Field(..., description="Unique URL-safe identifier for the category")
    name: str = Field(..., description="Display name of the category")
    description: Optional[str] = Field(None, description="Optional description of the category")
    image_url: Optional[str] = Field(None, description="Optional category image")
    parent_id: Optional[UUID] = Field(None, description="Parent category ID, None for a root")


class CategoryCreate(CategoryFields):
    """Schema for creating a new Category"""
    slug: Optional[str] = Field(None, description="Derived from name when omitted")

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value):
        return normalize_slug(value)

    @model_validator(mode="after")
    def _derive_slug(self):
        if self.slug is None:
            self.slug = slugify(self.name)
        return self


class CategoryUpdate(BaseModel):
    """Schema for updating a Category (all fields optional)"""
    slug: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    parent_id: Optional[UUID] = None

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value):
        return normalize_slug(value)


class CategoryRecord(CategoryFields):
    """One node of the taxonomy as read from storage"""
    id: UUID
    product_count: int = Field(0, ge=0, description="Products linked to this category")

    model_config = {"from_attributes": True}


class CategoryNode(CategoryRecord):
    """Tree view of a category; ``children`` is never persisted"""
    children: List["CategoryNode"] = Field(default_factory=list)

    def to_record(self) -> CategoryRecord:
        return CategoryRecord.model_validate(self.model_dump(exclude={"children"}))


CategoryNode.model_rebuild()
