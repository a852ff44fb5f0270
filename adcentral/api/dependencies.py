"""
Service dependencies for the API endpoints
"""
from fastapi import Depends
from adcentral.db.database import get_record_store
from adcentral.db.record_store import RecordStore
from adcentral.services.client_service import ClientService, create_client_service
from adcentral.services.campaign_service import CampaignService, create_campaign_service
from adcentral.services.roi_service import RoiService, create_roi_service
from adcentral.services.dashboard_service import DashboardService, create_dashboard_service

def get_client_service(store: RecordStore = Depends(get_record_store)) -> ClientService:
    return create_client_service(store)

def get_campaign_service(store: RecordStore = Depends(get_record_store)) -> CampaignService:
    return create_campaign_service(store)

def get_roi_service(store: RecordStore = Depends(get_record_store)) -> RoiService:
    return create_roi_service(store)

def get_dashboard_service(store: RecordStore = Depends(get_record_store)) -> DashboardService:
    return create_dashboard_service(store)
