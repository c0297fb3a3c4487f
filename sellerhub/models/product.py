"""Product model.

A listing uploaded by a seller. Rendered as-is, newest first.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sellerhub.stores.postgres import Base


def generate_product_id() -> str:
    """Generate unique product ID."""
    return str(uuid4())


class Product(Base):
    """Product listing owned by a seller."""

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("currency IN ('NGN', 'USD', 'GBP', 'EUR')", name="ck_products_currency"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_product_id)

    seller_id: Mapped[str] = mapped_column(
        ForeignKey("sellers.id", ondelete="CASCADE"),
        index=True,
    )
    seller = relationship("Seller", back_populates="products")

    # Media (CDN URLs)
    image_url: Mapped[str] = mapped_column(Text)
    video_url: Mapped[str | None] = mapped_column(Text)

    description: Mapped[str] = mapped_column(Text, default="")

    # Pricing
    price: Mapped[float] = mapped_column(default=0)
    currency: Mapped[str] = mapped_column(String(3), default="NGN")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.currency} {self.price:.2f}>"
