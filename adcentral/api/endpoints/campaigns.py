"""
Campaign management endpoints
"""
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from adcentral.api.dependencies import get_campaign_service
from adcentral.enums.status import CampaignStatus
from adcentral.services.campaign_service import CampaignService, CampaignServiceError
from adcentral.models.campaign_schema import CampaignCreate, CampaignUpdate, CampaignResponse, CampaignOption

router = APIRouter()

def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Campaign not found"
    )

@router.get("/", response_model=List[CampaignResponse])
async def get_campaigns(
    search: Optional[str] = None,
    campaign_status: Optional[CampaignStatus] = Query(None, alias="status"),
    client_id: Optional[str] = None,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Get campaigns, newest first"""
    return campaign_service.get_campaigns(
        search=search,
        status=campaign_status.value if campaign_status else None,
        client_id=client_id
    )

@router.get("/selectable", response_model=List[CampaignOption])
async def get_selectable_campaigns(
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Active or completed campaigns ordered by name"""
    return campaign_service.get_selectable_campaigns()

@router.get("/{campaign_id}", response_model=CampaignResponse)
async def get_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Get campaign by ID"""
    campaign = campaign_service.get_campaign(campaign_id)
    if not campaign:
        raise _not_found()
    return campaign

@router.post("/", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    campaign_data: CampaignCreate,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Create a new campaign"""
    try:
        return campaign_service.create_campaign(campaign_data)
    except CampaignServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )

@router.put("/{campaign_id}", response_model=CampaignResponse)
async def update_campaign(
    campaign_id: str,
    campaign_data: CampaignUpdate,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Update campaign by ID"""
    try:
        campaign = campaign_service.update_campaign(campaign_id, campaign_data)
    except CampaignServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    if not campaign:
        raise _not_found()
    return campaign

@router.post("/{campaign_id}/duplicate", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
async def duplicate_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Copy a campaign as a new draft"""
    campaign = campaign_service.duplicate_campaign(campaign_id)
    if not campaign:
        raise _not_found()
    return campaign

@router.get("/{campaign_id}/export", response_class=PlainTextResponse)
async def export_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Download a campaign as a text sheet"""
    exported = campaign_service.export_campaign(campaign_id)
    if not exported:
        raise _not_found()
    filename, content = exported
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{quote(filename)}"'}
    )

@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_campaign(
    campaign_id: str,
    campaign_service: CampaignService = Depends(get_campaign_service)
):
    """Delete campaign by ID, removing its ROI history"""
    success = campaign_service.delete_campaign(campaign_id)
    if not success:
        raise _not_found()
