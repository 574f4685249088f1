# routers/__init__.py

from fastapi import APIRouter

from .authz import router as authz_router


# Everything mounted under settings.API_PREFIX
api_router = APIRouter()

api_router.include_router(authz_router)

__all__ = ["api_router"]
