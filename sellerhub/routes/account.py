"""Seller self-service endpoints (registration and dashboard).

Authentication of the seller is handled in front of this service by the
hosted auth provider; these endpoints trust the seller ID they are given.
"""

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from sellerhub.schemas import (
    DeletedResponse,
    LinkResponse,
    ProductCreate,
    ProductRecord,
    ProductUpdate,
    ProfileUpdate,
    SellerRecord,
    SellerRegistration,
)
from sellerhub.schemas.common import error_body
from sellerhub.services.contact import ContactError
from sellerhub.services.media import UPLOAD_FOLDERS, CloudinaryClient, MediaUploadError
from sellerhub.services.plans import PLANS, PlanError, get_plan, upgrade_link
from sellerhub.services.products import (
    create_product,
    delete_product,
    list_products,
    update_product,
)
from sellerhub.services.sellers import (
    delete_seller,
    get_seller,
    register_seller,
    update_profile,
)
from sellerhub.settings import get_settings

router = APIRouter()


# ============================================================
# Profile
# ============================================================


@router.post("/sellers", response_model=SellerRecord, status_code=201)
async def register(request: SellerRegistration) -> SellerRecord:
    """Register a seller. The profile stays hidden until an admin approves it."""
    return await register_seller(request)


@router.get("/sellers/{seller_id}", response_model=SellerRecord)
async def get_own_profile(seller_id: str) -> SellerRecord:
    """Dashboard view of the seller's own profile (visible or not)."""
    return await _require_seller(seller_id)


@router.patch("/sellers/{seller_id}/profile", response_model=SellerRecord)
async def edit_profile(seller_id: str, request: ProfileUpdate) -> SellerRecord:
    """Update the seller's bio."""
    seller = await update_profile(seller_id, request.bio)
    if seller is None:
        raise _seller_not_found(seller_id)
    return seller


@router.delete("/sellers/{seller_id}", response_model=DeletedResponse)
async def delete_own_account(seller_id: str) -> DeletedResponse:
    """Permanently delete the seller profile and all products."""
    brand_name = await delete_seller(seller_id)
    if brand_name is None:
        raise _seller_not_found(seller_id)
    return DeletedResponse(success=True, message="Your account has been permanently deleted")


# ============================================================
# Products
# ============================================================


@router.get("/sellers/{seller_id}/products", response_model=list[ProductRecord])
async def get_own_products(seller_id: str) -> list[ProductRecord]:
    await _require_seller(seller_id)
    return await list_products(seller_id)


@router.post("/sellers/{seller_id}/products", response_model=ProductRecord, status_code=201)
async def add_product(seller_id: str, request: ProductCreate) -> ProductRecord:
    """Create a listing. Upload the image via POST /v1/account/media first."""
    await _require_seller(seller_id)
    return await create_product(seller_id, request)


@router.patch("/sellers/{seller_id}/products/{product_id}", response_model=ProductRecord)
async def edit_product(seller_id: str, product_id: str, request: ProductUpdate) -> ProductRecord:
    product = await update_product(seller_id, product_id, request)
    if product is None:
        raise _product_not_found(seller_id, product_id)
    return product


@router.delete("/sellers/{seller_id}/products/{product_id}", response_model=DeletedResponse)
async def remove_product(seller_id: str, product_id: str) -> DeletedResponse:
    if not await delete_product(seller_id, product_id):
        raise _product_not_found(seller_id, product_id)
    return DeletedResponse(success=True, message="Product deleted")


# ============================================================
# Plans
# ============================================================


@router.get("/plans")
async def list_plans() -> dict:
    """Subscription plans (NGN per month)."""
    return {
        "currency": "NGN",
        "plans": [
            {"name": p.name, "price": p.price, "features": list(p.features)}
            for p in PLANS
        ],
    }


@router.get("/sellers/{seller_id}/plans/{plan_name}/upgrade-link", response_model=LinkResponse)
async def get_upgrade_link(seller_id: str, plan_name: str) -> LinkResponse:
    """WhatsApp link asking the admin to activate a plan."""
    seller = await _require_seller(seller_id)
    plan = get_plan(plan_name)
    if plan is None:
        raise HTTPException(
            status_code=404,
            detail=error_body(
                "PLAN_NOT_FOUND",
                f"Unknown plan: {plan_name}",
                {"plans": [p.name for p in PLANS]},
            ),
        )

    try:
        url = upgrade_link(seller, plan, get_settings().admin_whatsapp_number)
    except PlanError as e:
        raise HTTPException(status_code=400, detail=error_body("PLAN_ALREADY_ACTIVE", str(e)))
    except ContactError as e:
        raise HTTPException(status_code=422, detail=error_body("NO_CONTACT_NUMBER", str(e)))
    return LinkResponse(url=url)


# ============================================================
# Media
# ============================================================


@router.post("/media", response_model=LinkResponse, status_code=201)
async def upload_media(
    file: UploadFile = File(...),
    folder: str = Form("products"),
) -> LinkResponse:
    """Upload an image or video to the CDN and return its URL."""
    if folder not in UPLOAD_FOLDERS:
        raise HTTPException(
            status_code=400,
            detail=error_body(
                "INVALID_FOLDER",
                f"Unsupported folder: {folder}",
                {"folders": list(UPLOAD_FOLDERS)},
            ),
        )

    try:
        content = await file.read()
        url = await CloudinaryClient().upload(content, file.filename or "upload", folder)
    except MediaUploadError as e:
        raise HTTPException(status_code=502, detail=error_body("UPLOAD_FAILED", str(e)))
    finally:
        await file.close()

    return LinkResponse(url=url)


async def _require_seller(seller_id: str) -> SellerRecord:
    seller = await get_seller(seller_id)
    if seller is None:
        raise _seller_not_found(seller_id)
    return seller


def _seller_not_found(seller_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=error_body("SELLER_NOT_FOUND", f"Seller {seller_id} not found", {"seller_id": seller_id}),
    )


def _product_not_found(seller_id: str, product_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=error_body(
            "PRODUCT_NOT_FOUND",
            f"Product {product_id} not found",
            {"seller_id": seller_id, "product_id": product_id},
        ),
    )
