"""Top-level API router: aggregates all endpoint routers."""

from fastapi import APIRouter

from phone_catalog.presentation.api.endpoints.auth import router as auth_router
from phone_catalog.presentation.api.endpoints.health import router as health_router
from phone_catalog.presentation.api.endpoints.phones import router as phones_router
from phone_catalog.presentation.api.endpoints.protected import router as protected_router
from phone_catalog.presentation.api.endpoints.upload import router as upload_router

router = APIRouter()
router.include_router(health_router)
router.include_router(phones_router)
router.include_router(auth_router)
router.include_router(protected_router)
router.include_router(upload_router)
