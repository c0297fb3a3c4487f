"""SQLAlchemy ORM models.

Models represent database tables:
- sellers: Seller profiles with subscription tier and visibility flags
- products: Product listings uploaded by sellers
"""

from sellerhub.models.seller import Seller
from sellerhub.models.product import Product

__all__ = ["Seller", "Product"]
