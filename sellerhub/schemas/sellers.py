"""Schemas for seller profiles, the buyer directory and the admin panel."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from sellerhub.schemas.products import ProductRecord
from sellerhub.services.expiry import ExpiryStatus
from sellerhub.services.search import SELLER_CATEGORIES

TierName = Literal["elite", "pro", "premium", "free"]


class SellerRecord(BaseModel):
    """A seller as seen by the directory, ranking and admin views.

    Fields other than id/brandName/category are optional: records coming from
    the store may be partially filled, and the ranking degrades gracefully.
    """

    id: str
    brand_name: str = Field(alias="brandName")
    ceo_name: str | None = Field(alias="ceoName", default=None)
    category: str
    country: str | None = None
    state: str | None = None
    bio: str | None = None
    whatsapp_number: str | None = Field(alias="whatsappNumber", default=None)
    profile_pic_url: str | None = Field(alias="profilePicUrl", default=None)
    status: str | None = None
    is_paid: bool | None = Field(alias="isPaid", default=None)
    is_approved: bool = Field(alias="isApproved", default=False)
    is_active: bool = Field(alias="isActive", default=False)
    is_featured: bool = Field(alias="isFeatured", default=False)
    premium_expiry: datetime | None = Field(alias="premiumExpiry", default=None)

    model_config = {"populate_by_name": True}


class DirectoryResponse(BaseModel):
    """Response payload for GET /v1/sellers."""

    sellers: list[SellerRecord]
    query: str
    category: str
    match_count: int = Field(alias="matchCount", ge=0)
    total_count: int = Field(alias="totalCount", ge=0)
    categories: list[str]

    model_config = {"populate_by_name": True}


class SellerProductsResponse(BaseModel):
    """Seller page: profile plus listings, newest first."""

    seller: SellerRecord
    products: list[ProductRecord]


class SellerRegistration(BaseModel):
    """Request body for seller registration."""

    brand_name: str = Field(alias="brandName", min_length=1, max_length=200)
    ceo_name: str = Field(alias="ceoName", min_length=1, max_length=200)
    category: str
    whatsapp_number: str = Field(alias="whatsappNumber", min_length=1, max_length=50)
    country: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=300)
    profile_pic_url: str | None = Field(alias="profilePicUrl", default=None)

    model_config = {"populate_by_name": True}

    @field_validator("brand_name", "ceo_name")
    @classmethod
    def _strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def _known_category(cls, v: str) -> str:
        if v not in SELLER_CATEGORIES:
            raise ValueError(f"category must be one of {list(SELLER_CATEGORIES)}")
        return v

    @field_validator("whatsapp_number")
    @classmethod
    def _has_digits(cls, v: str) -> str:
        if not any(ch.isdigit() for ch in v):
            raise ValueError("whatsapp number must contain digits")
        return v.strip()


class ProfileUpdate(BaseModel):
    """Seller dashboard bio edit."""

    bio: str = Field(max_length=300)


class AdminSellerView(SellerRecord):
    """Seller row in the admin panel with the renewal advisor's verdict."""

    expiry_status: ExpiryStatus = Field(alias="expiryStatus")
    days_remaining: int | None = Field(alias="daysRemaining", default=None)
    expiring_soon: bool = Field(alias="expiringSoon")


class AdminSellerList(BaseModel):
    count: int
    sellers: list[AdminSellerView]


class AdminSellerUpdate(BaseModel):
    """Partial update of admin-controlled fields (last write wins)."""

    status: TierName | None = None
    is_paid: bool | None = Field(alias="isPaid", default=None)
    is_approved: bool | None = Field(alias="isApproved", default=None)
    is_active: bool | None = Field(alias="isActive", default=None)
    is_featured: bool | None = Field(alias="isFeatured", default=None)
    premium_expiry: datetime | None = Field(alias="premiumExpiry", default=None)

    model_config = {"populate_by_name": True}

    @field_validator("status", mode="before")
    @classmethod
    def _lower_status(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class DeletedResponse(BaseModel):
    success: bool
    message: str
