"""
ROI/CAC calculator endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from adcentral.api.dependencies import get_roi_service
from adcentral.core.errors import MetricsValidationError
from adcentral.services.roi_service import RoiService
from adcentral.models.metrics_schema import (
    MetricsInput,
    MetricsHistoryRecord,
    CalculationResponse,
    AggregateStats,
    PerformancePoint,
    ValidationErrorDetail,
)

router = APIRouter()

def _rejected(error: MetricsValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=ValidationErrorDetail.from_exception(error).as_dict()
    )

@router.post("/calculate", response_model=CalculationResponse, status_code=status.HTTP_201_CREATED)
async def calculate(
    metrics_input: MetricsInput,
    roi_service: RoiService = Depends(get_roi_service)
):
    """Compute ROI/CAC metrics and save them in the history"""
    try:
        return roi_service.calculate_and_save(metrics_input)
    except MetricsValidationError as e:
        raise _rejected(e)

@router.post("/preview", response_model=CalculationResponse)
async def preview(
    metrics_input: MetricsInput,
    roi_service: RoiService = Depends(get_roi_service)
):
    """Compute ROI/CAC metrics without saving them"""
    try:
        return roi_service.preview(metrics_input)
    except MetricsValidationError as e:
        raise _rejected(e)

@router.get("/history", response_model=List[MetricsHistoryRecord])
async def get_history(
    limit: Optional[int] = Query(None, ge=0),
    campaign_id: Optional[str] = None,
    roi_service: RoiService = Depends(get_roi_service)
):
    """Most recent calculations, newest first"""
    return roi_service.get_history(limit=limit, campaign_id=campaign_id)

@router.get("/summary", response_model=AggregateStats)
async def get_summary(
    limit: Optional[int] = Query(None, ge=0),
    roi_service: RoiService = Depends(get_roi_service)
):
    """Count, mean ROI, total revenue and total investment of recent calculations"""
    return roi_service.get_summary(limit=limit)

@router.get("/performance", response_model=List[PerformancePoint])
async def get_performance(
    limit: Optional[int] = Query(None, ge=0),
    roi_service: RoiService = Depends(get_roi_service)
):
    """Recent calculations against the ROI and CAC benchmarks"""
    return roi_service.get_performance(limit=limit)
