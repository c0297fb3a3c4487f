"""Seller model.

Represents a seller profile: brand identity, contact number, subscription tier
and the admin-controlled visibility flags.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sellerhub.stores.postgres import Base


def generate_seller_id() -> str:
    """Generate unique seller ID."""
    return str(uuid4())


class Seller(Base):
    """Seller profile with tier and visibility flags."""

    __tablename__ = "sellers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_seller_id)

    # Identity
    brand_name: Mapped[str] = mapped_column(String(200), index=True)
    ceo_name: Mapped[str | None] = mapped_column(String(200))
    category: Mapped[str] = mapped_column(String(100), index=True)
    country: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(100))
    bio: Mapped[str | None] = mapped_column(Text)
    profile_pic_url: Mapped[str | None] = mapped_column(Text)

    # Contact
    whatsapp: Mapped[str | None] = mapped_column(String(50))

    # Subscription
    status: Mapped[str | None] = mapped_column(String(20), default="free")  # elite, pro, premium, free
    is_paid: Mapped[bool | None] = mapped_column(default=False)
    premium_expiry: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Visibility flags (admin)
    is_approved: Mapped[bool] = mapped_column(default=False, index=True)
    is_active: Mapped[bool] = mapped_column(default=True, index=True)
    is_featured: Mapped[bool] = mapped_column(default=False)

    products = relationship(
        "Product",
        back_populates="seller",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Seller {self.brand_name} ({self.status})>"
