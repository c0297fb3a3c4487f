"""Admin panel endpoints.

Every endpoint requires the X-Admin-Password header matching ADMIN_PASSWORD.

GET    /v1/admin/sellers                          - all sellers with expiry verdicts
GET    /v1/admin/sellers/expiring                 - sellers inside the renewal window
PATCH  /v1/admin/sellers/{sellerId}               - toggle tier/paid/approval/visibility/featured, set expiry
DELETE /v1/admin/sellers/{sellerId}               - delete seller and products
GET    /v1/admin/sellers/{sellerId}/expiry-alert  - WhatsApp renewal nudge link
"""

from datetime import datetime, timezone
import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException

from sellerhub.schemas import (
    AdminSellerList,
    AdminSellerUpdate,
    AdminSellerView,
    DeletedResponse,
    LinkResponse,
)
from sellerhub.schemas.common import error_body
from sellerhub.services.contact import EXPIRY_ALERT_MESSAGE, ContactError, whatsapp_link
from sellerhub.services.sellers import (
    build_admin_view,
    delete_seller,
    get_seller,
    list_all_sellers,
    update_seller_flags,
)
from sellerhub.settings import get_settings

logger = logging.getLogger("uvicorn.error")


async def require_admin(
    x_admin_password: str | None = Header(default=None, alias="X-Admin-Password"),
) -> None:
    """Reject requests without the admin password."""
    expected = get_settings().admin_password
    if not x_admin_password or not secrets.compare_digest(
        x_admin_password.encode("utf-8"), expected.encode("utf-8")
    ):
        raise HTTPException(
            status_code=401,
            detail=error_body("UNAUTHORIZED", "Invalid admin password"),
        )


router = APIRouter(dependencies=[Depends(require_admin)])


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/sellers", response_model=AdminSellerList)
async def admin_list_sellers() -> AdminSellerList:
    """All sellers ordered by brand name, with renewal verdicts."""
    now = _now()
    window = get_settings().expiry_alert_window_days
    views = [build_admin_view(s, now, window) for s in await list_all_sellers()]
    return AdminSellerList(count=len(views), sellers=views)


@router.get("/sellers/expiring", response_model=AdminSellerList)
async def admin_list_expiring() -> AdminSellerList:
    """Sellers whose plan expires within the alert window."""
    now = _now()
    window = get_settings().expiry_alert_window_days
    views = [build_admin_view(s, now, window) for s in await list_all_sellers()]
    expiring = [v for v in views if v.expiring_soon]
    return AdminSellerList(count=len(expiring), sellers=expiring)


@router.patch("/sellers/{seller_id}", response_model=AdminSellerView)
async def admin_update_seller(seller_id: str, request: AdminSellerUpdate) -> AdminSellerView:
    """Apply admin toggles. Unset fields are left unchanged."""
    seller = await update_seller_flags(seller_id, request)
    if seller is None:
        raise _seller_not_found(seller_id)
    return build_admin_view(seller, _now(), get_settings().expiry_alert_window_days)


@router.delete("/sellers/{seller_id}", response_model=DeletedResponse)
async def admin_delete_seller(seller_id: str) -> DeletedResponse:
    """Permanently delete a seller profile."""
    brand_name = await delete_seller(seller_id)
    if brand_name is None:
        raise _seller_not_found(seller_id)
    return DeletedResponse(
        success=True,
        message=f'Seller "{brand_name}" profile deleted permanently',
    )


@router.get("/sellers/{seller_id}/expiry-alert", response_model=LinkResponse)
async def admin_expiry_alert(seller_id: str) -> LinkResponse:
    """Renewal nudge for the seller, prepared as a WhatsApp link."""
    seller = await get_seller(seller_id)
    if seller is None:
        raise _seller_not_found(seller_id)

    try:
        url = whatsapp_link(seller.whatsapp_number, EXPIRY_ALERT_MESSAGE)
    except ContactError as e:
        raise HTTPException(
            status_code=422,
            detail=error_body("NO_CONTACT_NUMBER", str(e), {"seller_id": seller_id}),
        )

    logger.info(f"[admin] expiry alert prepared seller_id={seller_id}")
    return LinkResponse(url=url)


def _seller_not_found(seller_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=error_body("SELLER_NOT_FOUND", f"Seller {seller_id} not found", {"seller_id": seller_id}),
    )
