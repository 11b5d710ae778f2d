"""Health check and banner endpoints: no dependencies, always available."""

from fastapi import APIRouter

from phone_catalog.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/")
async def root() -> dict:
    return {"message": get_settings().app_title}


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
