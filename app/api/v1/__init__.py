"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import catalog, health, progress

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(progress.router, prefix="/progress", tags=["progress"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
