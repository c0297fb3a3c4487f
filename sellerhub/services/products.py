"""Product listing service.

Products belong to exactly one seller. Every write is scoped by seller_id so a
product can only be changed through its owner.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sellerhub.models import Product
from sellerhub.schemas.products import ProductCreate, ProductRecord, ProductUpdate
from sellerhub.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


def product_to_record(product: Product) -> ProductRecord:
    """Convert ORM row to API record."""
    return ProductRecord(
        id=product.id,
        seller_id=product.seller_id,
        image_url=product.image_url,
        video_url=product.video_url,
        description=product.description or "",
        price=product.price,
        currency=product.currency,
        created_at=product.created_at,
    )


async def list_products(seller_id: str) -> list[ProductRecord]:
    """List a seller's products, newest first."""
    async with get_session() as session:
        result = await session.execute(
            select(Product)
            .where(Product.seller_id == seller_id)
            .order_by(Product.created_at.desc())
        )
        return [product_to_record(p) for p in result.scalars().all()]


async def get_product(seller_id: str, product_id: str) -> ProductRecord | None:
    async with get_session() as session:
        product = await _load(session, seller_id, product_id)
        return product_to_record(product) if product else None


async def create_product(seller_id: str, data: ProductCreate) -> ProductRecord:
    """Create a listing for a seller."""
    async with get_session() as session:
        product = Product(
            seller_id=seller_id,
            image_url=data.image_url,
            video_url=data.video_url,
            description=data.description,
            price=data.price,
            currency=data.currency.value,
        )
        session.add(product)
        await session.flush()
        await session.refresh(product)
        logger.info(f"Product created: seller_id={seller_id} product_id={product.id}")
        return product_to_record(product)


async def update_product(
    seller_id: str,
    product_id: str,
    changes: ProductUpdate,
) -> ProductRecord | None:
    """Apply a partial update. Returns None if the product does not exist."""
    async with get_session() as session:
        product = await _load(session, seller_id, product_id)
        if product is None:
            return None

        for field, value in changes.model_dump(exclude_unset=True).items():
            if field == "currency" and value is not None:
                value = value.value
            if field in ("description", "price", "currency") and value is None:
                continue
            setattr(product, field, value)

        await session.flush()
        return product_to_record(product)


async def delete_product(seller_id: str, product_id: str) -> bool:
    """Delete a listing. Returns False if it does not exist."""
    async with get_session() as session:
        product = await _load(session, seller_id, product_id)
        if product is None:
            return False
        await session.delete(product)
        logger.info(f"Product deleted: seller_id={seller_id} product_id={product_id}")
        return True


async def _load(session: AsyncSession, seller_id: str, product_id: str) -> Product | None:
    result = await session.execute(
        select(Product)
        .where(Product.id == product_id)
        .where(Product.seller_id == seller_id)
    )
    return result.scalar_one_or_none()
