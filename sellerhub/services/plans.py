"""Subscription plan catalog and the upgrade request flow.

Upgrades are manual: the seller sends the admin a prefilled WhatsApp message,
and the admin flips the tier and paid flags in the admin panel.
"""

from dataclasses import dataclass

from sellerhub.schemas.sellers import SellerRecord
from sellerhub.services.contact import plan_upgrade_message, whatsapp_link
from sellerhub.services.ranking import Tier


@dataclass(frozen=True)
class Plan:
    """A paid subscription plan (price in NGN per month)."""

    name: str
    tier: Tier
    price: int
    features: tuple[str, ...]


PLANS: tuple[Plan, ...] = (
    Plan(
        name="Premium",
        tier=Tier.PREMIUM,
        price=5000,
        features=("Visible to customers", "Priority listing", "Premium badge", "Image uploads"),
    ),
    Plan(
        name="Pro",
        tier=Tier.PRO,
        price=12500,
        features=("All Premium features", "Higher ranking", "Pro badge"),
    ),
    Plan(
        name="Elite",
        tier=Tier.ELITE,
        price=25000,
        features=("All Pro features", "Homepage featured", "Verified badge", "Top placement"),
    ),
)


class PlanError(ValueError):
    pass


def get_plan(name: str) -> Plan | None:
    """Look up a plan by name (case-insensitive)."""
    normalized = name.strip().lower()
    for plan in PLANS:
        if plan.name.lower() == normalized:
            return plan
    return None


def upgrade_link(seller: SellerRecord, plan: Plan, admin_number: str) -> str:
    """Prefilled upgrade request to the admin's WhatsApp.

    Raises:
        PlanError: If the seller is already on this plan.
    """
    if Tier.from_status(seller.status) == plan.tier:
        raise PlanError(f"Already on the {plan.name} plan")
    message = plan_upgrade_message(seller.brand_name, seller.ceo_name, plan.name, plan.price)
    return whatsapp_link(admin_number, message)
