"""Search and category filtering over a ranked seller list.

Filtering is a subsequence selection: it never re-sorts, so the order
produced by the ranking service is preserved.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from sellerhub.schemas.sellers import SellerRecord

S = TypeVar("S", bound="SellerRecord")

CATEGORY_ALL = "All"

# Fixed list offered by the registration form.
SELLER_CATEGORIES: tuple[str, ...] = (
    "Fashion",
    "Electronics",
    "Food / Groceries",
    "Services",
)

DIRECTORY_CATEGORIES: tuple[str, ...] = (CATEGORY_ALL, *SELLER_CATEGORIES)


def _contains(field: object, needle: str) -> bool:
    return isinstance(field, str) and needle in field.casefold()


def matches_query(seller: SellerRecord, query: str) -> bool:
    """Case-insensitive substring match on brand name, category or CEO name.

    A blank (empty or whitespace-only) query matches every seller.
    """
    if not query or not query.strip():
        return True
    needle = query.casefold()
    return (
        _contains(seller.brand_name, needle)
        or _contains(seller.category, needle)
        or _contains(seller.ceo_name, needle)
    )


def matches_category(seller: SellerRecord, category: str | None) -> bool:
    """Exact (case-sensitive) category match; "All" matches everything."""
    if category is None or category == CATEGORY_ALL:
        return True
    return seller.category == category


def filter_sellers(
    sellers: Sequence[S],
    query: str = "",
    category: str | None = CATEGORY_ALL,
) -> list[S]:
    """Select the sellers matching query and category, keeping their order."""
    return [
        s for s in sellers
        if matches_query(s, query) and matches_category(s, category)
    ]
