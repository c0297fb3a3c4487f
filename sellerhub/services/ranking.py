"""Ranking service for the buyer-facing seller directory.

Ranking logic:
1. Paid sellers first (is_paid True before False/missing)
2. Then by tier: elite > pro > premium > free > unknown
3. Then alphabetically by brand name (locale-aware collation)

The ranking is a pure function of its input snapshot: it returns a new list
and never mutates the records or the input collection.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar
import unicodedata

if TYPE_CHECKING:
    from sellerhub.schemas.sellers import SellerRecord

S = TypeVar("S", bound="SellerRecord")


class Tier(IntEnum):
    """Subscription tier. Lower value ranks higher."""

    ELITE = 1
    PRO = 2
    PREMIUM = 3
    FREE = 4
    UNKNOWN = 99

    @classmethod
    def from_status(cls, status: Any) -> "Tier":
        """Map a stored status string to a tier (case-insensitive).

        Anything that is not one of the known tier names, including None,
        empty strings and non-string values, maps to UNKNOWN.
        """
        if not isinstance(status, str):
            return cls.UNKNOWN
        return _STATUS_TIERS.get(status.lower(), cls.UNKNOWN)


_STATUS_TIERS: dict[str, Tier] = {
    "elite": Tier.ELITE,
    "pro": Tier.PRO,
    "premium": Tier.PREMIUM,
    "free": Tier.FREE,
}


def collation_key(text: Any) -> tuple[str, str]:
    """Locale-aware sort key for display names.

    Primary level ignores accents and case ("Émile" sorts with "emile"),
    secondary level keeps accents so that equal base letters still order
    deterministically.
    """
    if not isinstance(text, str):
        text = ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), unicodedata.normalize("NFC", text).casefold()


def rank_key(seller: SellerRecord) -> tuple[int, int, tuple[str, str]]:
    """Comparator key: (paid bucket, tier, brand name collation)."""
    paid_bucket = 0 if seller.is_paid is True else 1
    return paid_bucket, int(Tier.from_status(seller.status)), collation_key(seller.brand_name)


def rank_sellers(sellers: Iterable[S]) -> list[S]:
    """Order sellers for the directory.

    Args:
        sellers: Any finite collection of seller records. Duplicates are kept.

    Returns:
        New list sorted paid-first, then by tier, then by brand name.
        Python's sort is stable, so records with equal keys keep their
        input order.
    """
    return sorted(sellers, key=rank_key)
