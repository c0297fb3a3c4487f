"""Outbound messaging deep links.

Buyers, sellers and the admin reach each other through WhatsApp click-to-chat
links (https://wa.me/<digits>?text=<message>). Numbers are stored as typed by
the seller, so they are normalized to digits before use.
"""

import re
from urllib.parse import quote

WHATSAPP_BASE_URL = "https://wa.me"

EXPIRY_ALERT_MESSAGE = (
    "Your Subscription has expired, kindly Subscribe to continue enjoying the service"
)

_NON_DIGITS = re.compile(r"\D")


class ContactError(ValueError):
    pass


def normalize_whatsapp(number: str | None) -> str:
    """Strip everything but digits ("+234 (800) 000-0000" -> "2348000000000")."""
    if not number:
        return ""
    return _NON_DIGITS.sub("", number)


def whatsapp_link(number: str | None, message: str) -> str:
    """Build a click-to-chat link with a prefilled message.

    Raises:
        ContactError: If the number has no digits.
    """
    digits = normalize_whatsapp(number)
    if not digits:
        raise ContactError("No WhatsApp number on file")
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(message, safe='')}"


def format_price(price: float) -> str:
    """Thousands separators, up to three decimals without trailing zeros.

    5000 -> "5,000", 1234.5 -> "1,234.5"
    """
    return f"{price:,.3f}".rstrip("0").rstrip(".")


def seller_profile_url(site_url: str, seller_id: str) -> str:
    return f"{site_url.rstrip('/')}/seller/{seller_id}"


def seller_contact_message(brand_name: str, profile_url: str) -> str:
    return f"Hi {brand_name}! I found you on the marketplace.\n\nYour Profile: {profile_url}"


def product_inquiry_message(
    brand_name: str,
    description: str,
    price: float,
    currency: str,
    image_url: str,
) -> str:
    return (
        f"Hi {brand_name}! I'm interested in buying this product:\n\n"
        f"{description}\n\n"
        f"Price: {currency} {format_price(price)}\n\n"
        f"Product Image: {image_url}"
    )


def plan_upgrade_message(brand_name: str, ceo_name: str | None, plan_name: str, price: float) -> str:
    return (
        f"Hi Admin! I'm {brand_name} (CEO: {ceo_name or 'N/A'}). "
        f"I want to upgrade to the {plan_name} plan (₦{format_price(price)}/month). "
        "Please activate my account."
    )
