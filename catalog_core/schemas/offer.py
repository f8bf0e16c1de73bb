# catalog_core/schemas/offer.py
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from catalog_core.core.clock import ensure_utc


class OfferState(str, Enum):
    INACTIVE = "inactive"
    SCHEDULED = "scheduled"
    ACTIVE = "active"
    EXPIRED = "expired"


@dataclass
class RemainingTime:
    """Time left until an offer's window closes"""
    days: int
    hours: int
    minutes: int
    is_expired: bool


class OfferFields(BaseModel):
    """Base Pydantic model for Offer data"""

    product_id: UUID = Field(..., description="Product this offer discounts")
    store_id: UUID = Field(..., description="Store publishing the offer")
    title: Optional[str] = Field(None, description="Optional headline shown with the offer")
    original_price: Decimal = Field(
        ..., gt=0, max_digits=10, decimal_places=2, description="Price before discount"
    )
    discounted_price: Decimal = Field(
        ..., gt=0, max_digits=10, decimal_places=2, description="Price after discount"
    )
    start_date: datetime = Field(..., description="Start of the discount window")
    end_date: datetime = Field(..., description="End of the discount window")
    is_active: bool = Field(True, description="Administrative on/off switch")

    @field_validator("start_date", "end_date")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class OfferCreate(OfferFields):
    """Schema for creating a new Offer"""

    # Accepted for compatibility with older forms; the prices always win.
    discount_percent: Optional[int] = Field(None, ge=0, le=100)


class OfferUpdate(BaseModel):
    """Schema for updating an Offer (all fields optional)"""

    title: Optional[str] = None
    original_price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    discounted_price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    discount_percent: Optional[int] = Field(None, ge=0, le=100)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: Optional[bool] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None


class OfferDraft(OfferFields):
    """Normalized offer ready to be inserted"""

    discount_percent: int = Field(..., ge=0, le=100)


class OfferRecord(OfferDraft):
    """Offer as stored"""

    id: UUID

    model_config = {"from_attributes": True}
