"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api import auth, components, health, tokens

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(tokens.router, prefix="/tokens", tags=["tokens"])
router.include_router(components.router, prefix="/components", tags=["components"])
