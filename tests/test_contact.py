from urllib.parse import parse_qs, urlparse

import pytest

from sellerhub.services.contact import (
    EXPIRY_ALERT_MESSAGE,
    ContactError,
    format_price,
    normalize_whatsapp,
    plan_upgrade_message,
    product_inquiry_message,
    seller_contact_message,
    seller_profile_url,
    whatsapp_link,
)


def _text(url: str) -> str:
    return parse_qs(urlparse(url).query)["text"][0]


def test_normalize_whatsapp_keeps_digits_only():
    assert normalize_whatsapp("+234 (800) 000-0000") == "2348000000000"
    assert normalize_whatsapp(None) == ""
    assert normalize_whatsapp("") == ""


def test_whatsapp_link_encodes_message():
    url = whatsapp_link("+234 801 234 5678", "Hi there & welcome?")
    assert url.startswith("https://wa.me/2348012345678?text=")
    assert "&" not in url.split("?text=", 1)[1]
    assert _text(url) == "Hi there & welcome?"


def test_whatsapp_link_without_digits_raises():
    with pytest.raises(ContactError):
        whatsapp_link("call me", "hello")
    with pytest.raises(ContactError):
        whatsapp_link(None, "hello")


def test_format_price():
    assert format_price(5000) == "5,000"
    assert format_price(1234567.0) == "1,234,567"
    assert format_price(1234.5) == "1,234.5"
    assert format_price(19.25) == "19.25"
    assert format_price(0) == "0"


def test_seller_contact_message_includes_profile_url():
    profile = seller_profile_url("https://market.example/", "abc-123")
    assert profile == "https://market.example/seller/abc-123"

    message = seller_contact_message("Zuri Fabrics", profile)
    assert message.startswith("Hi Zuri Fabrics!")
    assert profile in message


def test_product_inquiry_message():
    message = product_inquiry_message(
        "Volt Gadgets",
        "Power bank",
        22000,
        "NGN",
        "https://cdn.example/p.jpg",
    )
    assert "Power bank" in message
    assert "Price: NGN 22,000" in message
    assert "Product Image: https://cdn.example/p.jpg" in message


def test_plan_upgrade_message_without_ceo():
    message = plan_upgrade_message("Quick Fix", None, "Pro", 12500)
    assert "CEO: N/A" in message
    assert "Pro plan" in message
    assert "12,500" in message


def test_expiry_alert_message_round_trips_through_link():
    url = whatsapp_link("2348000000000", EXPIRY_ALERT_MESSAGE)
    assert _text(url) == EXPIRY_ALERT_MESSAGE
