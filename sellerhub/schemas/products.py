"""Schemas for product listings."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Currency(str, Enum):
    NGN = "NGN"
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"


class ProductRecord(BaseModel):
    """A product as rendered on the seller's page."""

    id: str
    seller_id: str = Field(alias="sellerId")
    image_url: str = Field(alias="imageUrl")
    video_url: str | None = Field(alias="videoUrl", default=None)
    description: str = ""
    price: float = Field(ge=0)
    currency: Currency = Currency.NGN
    created_at: datetime | None = Field(alias="createdAt", default=None)

    model_config = {"populate_by_name": True}


class ProductCreate(BaseModel):
    """Request body for a new listing (image already uploaded to the CDN)."""

    image_url: str = Field(alias="imageUrl", min_length=1)
    video_url: str | None = Field(alias="videoUrl", default=None)
    description: str = Field(default="", max_length=2000)
    price: float = Field(ge=0)
    currency: Currency = Currency.NGN

    model_config = {"populate_by_name": True}


class ProductUpdate(BaseModel):
    """Partial update of a listing."""

    description: str | None = Field(default=None, max_length=2000)
    price: float | None = Field(default=None, ge=0)
    currency: Currency | None = None
    video_url: str | None = Field(alias="videoUrl", default=None)

    model_config = {"populate_by_name": True}
