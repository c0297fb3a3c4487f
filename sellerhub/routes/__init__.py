"""API routes."""

from fastapi import APIRouter

from sellerhub.routes import account, admin, directory

api_router = APIRouter()

# Buyer-facing directory (ranked, searchable)
api_router.include_router(directory.router, prefix="/v1/sellers", tags=["directory"])

# Seller self-service (registration, dashboard, uploads)
api_router.include_router(account.router, prefix="/v1/account", tags=["account"])

# Admin panel (password protected)
api_router.include_router(admin.router, prefix="/v1/admin", tags=["admin"])
