"""Tests for the admin panel endpoints."""

from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlparse

import pytest
from httpx import ASGITransport, AsyncClient

from sellerhub.main import app
from sellerhub.schemas import AdminSellerUpdate, SellerRecord
from sellerhub.services.contact import EXPIRY_ALERT_MESSAGE
from sellerhub.settings import get_settings

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def client():
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Password": get_settings().admin_password}


@pytest.fixture(autouse=True)
def fixed_now(monkeypatch: pytest.MonkeyPatch):
    from sellerhub.routes import admin as admin_routes

    monkeypatch.setattr(admin_routes, "_now", lambda: NOW)


def _seller(sid: str, brand: str, expiry: datetime | None, whatsapp: str | None = "08012345678") -> SellerRecord:
    return SellerRecord(
        id=sid,
        brand_name=brand,
        category="Fashion",
        status="premium",
        is_paid=True,
        is_approved=True,
        is_active=True,
        whatsapp_number=whatsapp,
        premium_expiry=expiry,
    )


SELLERS = [
    _seller("s-1", "Active Co", NOW + timedelta(days=40)),
    _seller("s-2", "Soon Co", NOW + timedelta(days=3)),
    _seller("s-3", "Expired Co", NOW - timedelta(days=2)),
    _seller("s-4", "Free Co", None),
]


@pytest.mark.asyncio
async def test_requires_admin_password(client: AsyncClient):
    response = await client.get("/v1/admin/sellers")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"

    response = await client.get("/v1/admin/sellers", headers={"X-Admin-Password": "wrong"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_sellers_with_expiry_verdicts(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    async def fake_list_all_sellers() -> list[SellerRecord]:
        return SELLERS

    monkeypatch.setattr(admin_routes, "list_all_sellers", fake_list_all_sellers)

    response = await client.get("/v1/admin/sellers", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 4

    by_id = {s["id"]: s for s in data["sellers"]}
    assert by_id["s-1"]["expiryStatus"] == "active"
    assert by_id["s-1"]["expiringSoon"] is False
    assert by_id["s-2"]["expiryStatus"] == "expiring_soon"
    assert by_id["s-2"]["daysRemaining"] == 3
    assert by_id["s-2"]["expiringSoon"] is True
    assert by_id["s-3"]["expiryStatus"] == "expired"
    assert by_id["s-3"]["expiringSoon"] is False
    assert by_id["s-4"]["expiryStatus"] == "none"
    assert by_id["s-4"]["daysRemaining"] is None


@pytest.mark.asyncio
async def test_list_expiring(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    async def fake_list_all_sellers() -> list[SellerRecord]:
        return SELLERS

    monkeypatch.setattr(admin_routes, "list_all_sellers", fake_list_all_sellers)

    response = await client.get("/v1/admin/sellers/expiring", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert [s["id"] for s in data["sellers"]] == ["s-2"]


@pytest.mark.asyncio
async def test_update_seller_flags(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    seen: dict[str, object] = {}

    async def fake_update_seller_flags(seller_id: str, changes: AdminSellerUpdate) -> SellerRecord | None:
        seen["changes"] = changes.model_dump(exclude_unset=True)
        updated = SELLERS[0].model_copy(update={"status": changes.status, "is_approved": changes.is_approved})
        return updated

    monkeypatch.setattr(admin_routes, "update_seller_flags", fake_update_seller_flags)

    response = await client.patch(
        "/v1/admin/sellers/s-1",
        json={"status": "ELITE", "isApproved": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert seen["changes"] == {"status": "elite", "is_approved": False}
    data = response.json()
    assert data["status"] == "elite"
    assert data["isApproved"] is False


@pytest.mark.asyncio
async def test_update_rejects_unknown_tier(client: AsyncClient, admin_headers: dict[str, str]):
    response = await client.patch(
        "/v1/admin/sellers/s-1",
        json={"status": "gold"},
        headers=admin_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_seller(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    async def fake_delete_seller(seller_id: str) -> str | None:
        return "Soon Co" if seller_id == "s-2" else None

    monkeypatch.setattr(admin_routes, "delete_seller", fake_delete_seller)

    response = await client.delete("/v1/admin/sellers/s-2", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": 'Seller "Soon Co" profile deleted permanently',
    }

    response = await client.delete("/v1/admin/sellers/s-9", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SELLER_NOT_FOUND"


@pytest.mark.asyncio
async def test_expiry_alert_link(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    async def fake_get_seller(seller_id: str) -> SellerRecord | None:
        return SELLERS[1]

    monkeypatch.setattr(admin_routes, "get_seller", fake_get_seller)

    response = await client.get("/v1/admin/sellers/s-2/expiry-alert", headers=admin_headers)
    assert response.status_code == 200
    url = urlparse(response.json()["url"])
    assert url.path == "/08012345678"
    assert parse_qs(url.query)["text"][0] == EXPIRY_ALERT_MESSAGE


@pytest.mark.asyncio
async def test_expiry_alert_without_number(
    client: AsyncClient,
    admin_headers: dict[str, str],
    monkeypatch: pytest.MonkeyPatch,
):
    from sellerhub.routes import admin as admin_routes

    async def fake_get_seller(seller_id: str) -> SellerRecord | None:
        return _seller("s-5", "Silent Co", None, whatsapp=None)

    monkeypatch.setattr(admin_routes, "get_seller", fake_get_seller)

    response = await client.get("/v1/admin/sellers/s-5/expiry-alert", headers=admin_headers)
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "NO_CONTACT_NUMBER"
