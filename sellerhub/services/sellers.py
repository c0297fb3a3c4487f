"""Seller account service.

Covers the seller lifecycle outside the directory:
- Registration (new sellers start hidden: free tier, unpaid, not approved)
- Dashboard profile edits
- Admin panel: listing, flag toggles, deletion

Every write that can change what buyers see drops the directory snapshot.
"""

from datetime import datetime
import logging
from typing import Any

from sqlalchemy import delete, select

from sellerhub.models import Product, Seller
from sellerhub.schemas.sellers import (
    AdminSellerUpdate,
    AdminSellerView,
    SellerRecord,
    SellerRegistration,
)
from sellerhub.services.directory import invalidate_directory_cache, seller_to_record
from sellerhub.services.expiry import classify_expiry, days_remaining, is_expiring_soon
from sellerhub.stores.postgres import get_session

logger = logging.getLogger("uvicorn.error")


async def register_seller(data: SellerRegistration) -> SellerRecord:
    """Create a seller profile pending admin approval."""
    async with get_session() as session:
        seller = Seller(
            brand_name=data.brand_name,
            ceo_name=data.ceo_name,
            category=data.category,
            whatsapp=data.whatsapp_number,
            country=data.country,
            state=data.state,
            bio=data.bio,
            profile_pic_url=data.profile_pic_url,
            status="free",
            is_paid=False,
            is_approved=False,
            is_active=True,
            is_featured=False,
        )
        session.add(seller)
        await session.flush()
        record = seller_to_record(seller)

    logger.info(f"Seller registered: id={record.id} brand={record.brand_name!r}")
    await invalidate_directory_cache()
    return record


async def get_seller(seller_id: str) -> SellerRecord | None:
    """Get any seller, visible or not."""
    async with get_session() as session:
        seller = await session.get(Seller, seller_id)
        return seller_to_record(seller) if seller else None


async def update_profile(seller_id: str, bio: str) -> SellerRecord | None:
    """Update the seller's bio. Returns None if the seller does not exist."""
    async with get_session() as session:
        seller = await session.get(Seller, seller_id)
        if seller is None:
            return None
        seller.bio = bio
        await session.flush()
        record = seller_to_record(seller)

    await invalidate_directory_cache()
    return record


async def list_all_sellers() -> list[SellerRecord]:
    """All sellers for the admin panel, by brand name."""
    async with get_session() as session:
        result = await session.execute(select(Seller).order_by(Seller.brand_name.asc()))
        return [seller_to_record(s) for s in result.scalars().all()]


def admin_field_updates(changes: AdminSellerUpdate) -> dict[str, Any]:
    """Columns to write for an admin update.

    Unset fields are left alone. An explicit null clears premium_expiry and is
    ignored for the tier and the flags.
    """
    return {
        field: value
        for field, value in changes.model_dump(exclude_unset=True).items()
        if value is not None or field == "premium_expiry"
    }


async def update_seller_flags(seller_id: str, changes: AdminSellerUpdate) -> SellerRecord | None:
    """Apply admin toggles (last write wins). Returns None if not found."""
    updates = admin_field_updates(changes)

    async with get_session() as session:
        seller = await session.get(Seller, seller_id)
        if seller is None:
            return None
        for field, value in updates.items():
            setattr(seller, field, value)
        await session.flush()
        record = seller_to_record(seller)

    logger.info(f"Seller updated by admin: id={seller_id} changes={updates}")
    await invalidate_directory_cache()
    return record


async def delete_seller(seller_id: str) -> str | None:
    """Delete a seller and their products.

    Returns:
        The deleted seller's brand name, or None if not found.
    """
    async with get_session() as session:
        seller = await session.get(Seller, seller_id)
        if seller is None:
            return None
        brand_name = seller.brand_name
        await session.execute(delete(Product).where(Product.seller_id == seller_id))
        await session.delete(seller)

    logger.info(f"Seller deleted: id={seller_id} brand={brand_name!r}")
    await invalidate_directory_cache()
    return brand_name


def build_admin_view(
    seller: SellerRecord,
    now: datetime,
    window_days: int,
) -> AdminSellerView:
    """Attach the renewal advisor's verdict to a seller row."""
    return AdminSellerView(
        **seller.model_dump(),
        expiry_status=classify_expiry(seller.premium_expiry, now, window_days),
        days_remaining=days_remaining(seller.premium_expiry, now),
        expiring_soon=is_expiring_soon(seller.premium_expiry, now, window_days),
    )
