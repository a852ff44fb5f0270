"""
Dashboard endpoints
"""
from fastapi import APIRouter, Depends
from adcentral.api.dependencies import get_dashboard_service
from adcentral.services.dashboard_service import DashboardService
from adcentral.models.dashboard import DashboardOverview

router = APIRouter()

@router.get("/", response_model=DashboardOverview)
async def get_dashboard(
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """Client, campaign and recent ROI statistics"""
    return dashboard_service.get_overview()
