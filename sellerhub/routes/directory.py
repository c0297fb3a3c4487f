"""Buyer-facing directory endpoints.

GET /v1/sellers                      - ranked, searchable list of visible sellers
GET /v1/sellers/categories           - category filter options
GET /v1/sellers/{sellerId}           - one visible seller
GET /v1/sellers/{sellerId}/products  - seller page (profile + listings)
GET /v1/sellers/{sellerId}/contact   - WhatsApp link to the seller
GET /v1/sellers/{sellerId}/products/{productId}/contact - product inquiry link

Routers are thin: call services for business logic.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query

from sellerhub.schemas import (
    DirectoryResponse,
    LinkResponse,
    SellerProductsResponse,
    SellerRecord,
)
from sellerhub.schemas.common import error_body
from sellerhub.services.contact import (
    ContactError,
    product_inquiry_message,
    seller_contact_message,
    seller_profile_url,
    whatsapp_link,
)
from sellerhub.services.directory import browse_directory, get_visible_seller
from sellerhub.services.products import get_product, list_products
from sellerhub.services.search import CATEGORY_ALL, DIRECTORY_CATEGORIES
from sellerhub.settings import get_settings

router = APIRouter()

SellerId = Annotated[
    str,
    Path(
        description="Seller ID",
        min_length=1,
        max_length=64,
        pattern=r"^[a-zA-Z0-9_-]+$",
    ),
]


@router.get("", response_model=DirectoryResponse)
async def list_sellers(
    q: str = Query(
        default="",
        max_length=100,
        description="Search brand name, category or CEO name (case-insensitive)",
    ),
    category: str = Query(
        default=CATEGORY_ALL,
        max_length=100,
        description='Exact category, or "All"',
        examples=["All", "Fashion"],
    ),
) -> DirectoryResponse:
    """List visible sellers: paid first, then tier, then brand name."""
    result = await browse_directory(query=q, category=category)
    return DirectoryResponse(
        sellers=result.sellers,
        query=q,
        category=category,
        match_count=result.match_count,
        total_count=result.total_count,
        categories=list(DIRECTORY_CATEGORIES),
    )


@router.get("/categories")
async def list_categories() -> dict[str, list[str]]:
    """Category filter options ("All" first)."""
    return {"categories": list(DIRECTORY_CATEGORIES)}


@router.get("/{seller_id}", response_model=SellerRecord)
async def get_seller_profile(seller_id: SellerId) -> SellerRecord:
    """Get a visible seller's public profile."""
    return await _require_visible_seller(seller_id)


@router.get("/{seller_id}/products", response_model=SellerProductsResponse)
async def get_seller_products(seller_id: SellerId) -> SellerProductsResponse:
    """Seller page: profile and products, newest first."""
    seller = await _require_visible_seller(seller_id)
    products = await list_products(seller_id)
    return SellerProductsResponse(seller=seller, products=products)


@router.get("/{seller_id}/contact", response_model=LinkResponse)
async def contact_seller(seller_id: SellerId) -> LinkResponse:
    """WhatsApp link with the seller's profile URL prefilled."""
    seller = await _require_visible_seller(seller_id)
    profile_url = seller_profile_url(get_settings().site_url, seller.id)
    message = seller_contact_message(seller.brand_name, profile_url)
    return LinkResponse(url=_link_or_422(seller, message))


@router.get("/{seller_id}/products/{product_id}/contact", response_model=LinkResponse)
async def contact_seller_about_product(
    seller_id: SellerId,
    product_id: str = Path(description="Product ID", min_length=1, max_length=64),
) -> LinkResponse:
    """WhatsApp link asking the seller about one product."""
    seller = await _require_visible_seller(seller_id)
    product = await get_product(seller_id, product_id)
    if product is None:
        raise HTTPException(
            status_code=404,
            detail=error_body(
                "PRODUCT_NOT_FOUND",
                f"Product {product_id} not found",
                {"seller_id": seller_id, "product_id": product_id},
            ),
        )

    message = product_inquiry_message(
        seller.brand_name,
        product.description,
        product.price,
        product.currency.value,
        product.image_url,
    )
    return LinkResponse(url=_link_or_422(seller, message))


async def _require_visible_seller(seller_id: str) -> SellerRecord:
    seller = await get_visible_seller(seller_id)
    if seller is None:
        raise HTTPException(
            status_code=404,
            detail=error_body(
                "SELLER_NOT_FOUND",
                f"Seller {seller_id} not found",
                {"seller_id": seller_id},
            ),
        )
    return seller


def _link_or_422(seller: SellerRecord, message: str) -> str:
    try:
        return whatsapp_link(seller.whatsapp_number, message)
    except ContactError as e:
        raise HTTPException(
            status_code=422,
            detail=error_body("NO_CONTACT_NUMBER", str(e), {"seller_id": seller.id}),
        )
