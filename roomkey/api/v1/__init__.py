"""API v1 routes."""

from fastapi import APIRouter

from roomkey.api.v1 import auth, catalog, health, room
from roomkey.schemas.common import error_responses

# Every route can fail with the 500 envelope (database down, misconfigured users table).
router = APIRouter(responses=error_responses(500))
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(room.router, prefix="/room", tags=["room"])
router.include_router(catalog.router, tags=["catalog"])
