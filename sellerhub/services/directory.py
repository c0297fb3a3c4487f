"""Directory service: the buyer-facing list of sellers.

Flow:
1. Fetch visible sellers (is_active AND is_approved) - Redis snapshot first,
   PostgreSQL on cache miss
2. Rank (paid first, tier, brand name) - see services.ranking
3. Filter by search query and category - see services.search

If Redis is unavailable (e.g. tests / local minimal env), the service still
works but skips caching.
"""

from dataclasses import dataclass
import logging

from pydantic import ValidationError
from redis.exceptions import RedisError
from sqlalchemy import select

from sellerhub.models import Seller
from sellerhub.schemas.sellers import SellerRecord
from sellerhub.services.ranking import rank_sellers
from sellerhub.services.search import CATEGORY_ALL, filter_sellers
from sellerhub.settings import get_settings
from sellerhub.stores.postgres import get_session
from sellerhub.stores.redis import (
    clear_visible_sellers_cache,
    get_visible_sellers_cache,
    set_visible_sellers_cache,
)

logger = logging.getLogger("uvicorn.error")


@dataclass
class DirectoryResult:
    """One rendering of the directory."""

    sellers: list[SellerRecord]
    match_count: int
    total_count: int


def seller_to_record(seller: Seller) -> SellerRecord:
    """Convert ORM row to the read-model used by ranking and the API."""
    return SellerRecord(
        id=seller.id,
        brand_name=seller.brand_name,
        ceo_name=seller.ceo_name,
        category=seller.category,
        country=seller.country,
        state=seller.state,
        bio=seller.bio,
        whatsapp_number=seller.whatsapp,
        profile_pic_url=seller.profile_pic_url,
        status=seller.status,
        is_paid=seller.is_paid,
        is_approved=bool(seller.is_approved),
        is_active=bool(seller.is_active),
        is_featured=bool(seller.is_featured),
        premium_expiry=seller.premium_expiry,
    )


async def fetch_visible_sellers() -> list[SellerRecord]:
    """Get all sellers buyers may see, in store order (unranked)."""
    ttl = get_settings().directory_cache_ttl

    if ttl > 0:
        cached = await _try_get_cached_sellers()
        if cached is not None:
            logger.info(f"Directory loaded from cache: {len(cached)} sellers")
            return cached

    async with get_session() as session:
        result = await session.execute(
            select(Seller)
            .where(Seller.is_active.is_(True))
            .where(Seller.is_approved.is_(True))
        )
        sellers = [seller_to_record(s) for s in result.scalars().all()]

    logger.info(f"Directory loaded from DB: {len(sellers)} sellers")
    if ttl > 0:
        await _try_set_cached_sellers(sellers, ttl)
    return sellers


async def get_visible_seller(seller_id: str) -> SellerRecord | None:
    """Get one seller if buyers may see it."""
    async with get_session() as session:
        result = await session.execute(
            select(Seller)
            .where(Seller.id == seller_id)
            .where(Seller.is_active.is_(True))
            .where(Seller.is_approved.is_(True))
        )
        seller = result.scalar_one_or_none()
        return seller_to_record(seller) if seller else None


async def browse_directory(query: str = "", category: str = CATEGORY_ALL) -> DirectoryResult:
    """Ranked and filtered directory page.

    Args:
        query: Free-text search on brand, category and CEO name.
        category: Exact category, or "All".

    Returns:
        DirectoryResult with matches in rank order.
    """
    visible = await fetch_visible_sellers()
    ranked = rank_sellers(visible)
    matches = filter_sellers(ranked, query=query, category=category)
    return DirectoryResult(sellers=matches, match_count=len(matches), total_count=len(ranked))


async def invalidate_directory_cache() -> None:
    """Drop the cached snapshot after a write that changes visibility or rank."""
    try:
        await clear_visible_sellers_cache()
    except (RuntimeError, RedisError):
        # Redis may be unavailable in tests/local minimal env.
        return


async def _try_get_cached_sellers() -> list[SellerRecord] | None:
    try:
        payload = await get_visible_sellers_cache()
    except (RuntimeError, RedisError):
        return None
    if payload is None:
        return None

    try:
        return [SellerRecord.model_validate(item) for item in payload]
    except ValidationError:
        logger.warning("Directory cache payload invalid, reloading from DB")
        return None


async def _try_set_cached_sellers(sellers: list[SellerRecord], ttl: int) -> None:
    payload = [s.model_dump(mode="json", by_alias=True) for s in sellers]
    try:
        await set_visible_sellers_cache(payload, ttl)
    except (RuntimeError, RedisError):
        # Redis may be unavailable in tests/local minimal env.
        return
