"""
ROI service - runs the metrics engine and keeps the calculation history
"""
import logging
from typing import List, Optional
from adcentral.core.config import settings
from adcentral.core.errors import MetricsValidationError, InvalidValue
from adcentral.db.record_store import RecordStore
from adcentral.models.metrics_schema import (
    MetricsInput,
    MetricsResult,
    MetricsHistoryRecord,
    CalculationResponse,
    AggregateStats,
    PerformancePoint,
)
from adcentral.services.metrics_engine import (
    compute_metrics,
    build_history_record,
    summarize,
    performance_series,
)
from adcentral.utils.formatting import format_metrics

logger = logging.getLogger(__name__)

COLLECTION = "roi_calculations"

class RoiService:
    """
    Service for ROI/CAC simulations

    Computing and saving are separate steps; ``calculate_and_save`` chains
    them, which is how the calculator screen always behaves.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    def calculate(self, metrics_input: MetricsInput) -> MetricsResult:
        """
        Compute metrics without persisting anything

        Raises:
            MetricsValidationError: If the input is rejected
        """
        try:
            return compute_metrics(metrics_input)
        except MetricsValidationError as e:
            logger.warning("Rejected ROI input on field '%s': %s", e.field, e)
            raise

    def save(self, metrics_input: MetricsInput, result: MetricsResult) -> MetricsHistoryRecord:
        """
        Persist a calculation in the history

        The result is derived again from the input and must match, so a
        stored record never carries metrics from different inputs.

        Raises:
            MetricsValidationError: If the input is invalid, references an unknown
                campaign or does not produce ``result``
            StoreError: If the record store fails
        """
        if self.calculate(metrics_input) != result:
            raise InvalidValue("result", "does not match the metrics computed from the input")

        campaign_id = metrics_input.campaign_id
        if campaign_id and self._store.get("campaigns", campaign_id) is None:
            raise InvalidValue("campaign_id", f"campaign {campaign_id} does not exist")

        record_id = self._store.insert(COLLECTION, build_history_record(metrics_input, result))
        logger.info("ROI calculation %s saved (roi=%.2f%%)", record_id, result.roi_percent)
        return MetricsHistoryRecord(**self._store.get(COLLECTION, record_id))

    def calculate_and_save(self, metrics_input: MetricsInput) -> CalculationResponse:
        """Compute metrics and immediately record them in the history"""
        result = self.calculate(metrics_input)
        record = self.save(metrics_input, result)
        return CalculationResponse(result=result, record=record, display=format_metrics(result))

    def preview(self, metrics_input: MetricsInput) -> CalculationResponse:
        """Compute metrics for display only"""
        result = self.calculate(metrics_input)
        return CalculationResponse(result=result, display=format_metrics(result))

    def get_history(self, limit: Optional[int] = None, campaign_id: Optional[str] = None) -> List[MetricsHistoryRecord]:
        """
        Get the most recent calculations, newest first

        Args:
            limit: Maximum number of records (defaults to ROI_HISTORY_LIMIT)
            campaign_id: Only calculations for this campaign
        """
        limit = settings.ROI_HISTORY_LIMIT if limit is None else limit
        records = self._store.select(
            COLLECTION,
            filters={"campaign_id": campaign_id} if campaign_id else None,
            order_by="created_at",
            descending=True,
            limit=limit,
        )
        return [MetricsHistoryRecord(**record) for record in records]

    def get_summary(self, limit: Optional[int] = None) -> AggregateStats:
        """Aggregate the most recent calculations"""
        limit = settings.DASHBOARD_ROI_LIMIT if limit is None else limit
        if limit < 0:
            raise InvalidValue("limit", "must be greater than or equal to zero")
        return summarize(self.get_history(limit=limit), limit)

    def get_performance(self, limit: Optional[int] = None) -> List[PerformancePoint]:
        """Compare the most recent calculations against the ROI and CAC benchmarks"""
        limit = settings.PERFORMANCE_CHART_LIMIT if limit is None else limit
        if limit < 0:
            raise InvalidValue("limit", "must be greater than or equal to zero")
        return performance_series(self.get_history(limit=limit), limit)

def create_roi_service(store: RecordStore) -> RoiService:
    """
    Create and return a RoiService instance

    Args:
        store: Record store backing the service

    Returns:
        RoiService: Configured ROI service instance
    """
    return RoiService(store)
