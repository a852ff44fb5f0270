"""
Main API router that includes all sub-routers
"""
from fastapi import APIRouter
from adcentral.api.endpoints import health, clients, campaigns, roi, dashboard

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(campaigns.router, prefix="/campaigns", tags=["campaigns"])
api_router.include_router(roi.router, prefix="/roi", tags=["roi"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
