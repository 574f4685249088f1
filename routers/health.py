# routers/health.py

from fastapi import APIRouter

from core.config import settings
from core.permissions import PERMISSIONS_BY_ROLE

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/app
# Simple API health check for uptime monitors
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight health check. Also reports how many role grids are loaded.
    """
    return {
        "service": settings.PROJECT_NAME,
        "status": "ok",
        "roles_loaded": len(PERMISSIONS_BY_ROLE),
    }
