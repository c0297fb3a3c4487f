"""Pydantic schemas for API request/response validation."""

from sellerhub.schemas.common import ErrorDetail, ErrorResponse, LinkResponse
from sellerhub.schemas.products import (
    Currency,
    ProductCreate,
    ProductRecord,
    ProductUpdate,
)
from sellerhub.schemas.sellers import (
    AdminSellerList,
    AdminSellerUpdate,
    AdminSellerView,
    DeletedResponse,
    DirectoryResponse,
    ProfileUpdate,
    SellerProductsResponse,
    SellerRecord,
    SellerRegistration,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "LinkResponse",
    "Currency",
    "ProductCreate",
    "ProductRecord",
    "ProductUpdate",
    "AdminSellerList",
    "AdminSellerUpdate",
    "AdminSellerView",
    "DeletedResponse",
    "DirectoryResponse",
    "ProfileUpdate",
    "SellerProductsResponse",
    "SellerRecord",
    "SellerRegistration",
]
