"""
Dashboard service - Polars aggregations over clients, campaigns and ROI history
"""
from typing import Any, Dict, List

import polars as pl
from polars import col

from adcentral.core.config import settings
from adcentral.db.record_store import RecordStore
from adcentral.enums.status import ClientStatus, CampaignStatus
from adcentral.models.dashboard import ClientStats, CampaignStats, DashboardOverview
from adcentral.services.roi_service import RoiService


def _status_counts(statuses) -> List[pl.Expr]:
    """One counting expression per status value"""
    return [
        (col("status") == status.value).sum().alias(status.value)
        for status in statuses
    ]


class DashboardService:
    """Service computing the dashboard statistics"""

    def __init__(self, store: RecordStore):
        self._store = store
        self._roi_service = RoiService(store)

    def _frame(self, collection: str, schema: Dict[str, Any]) -> pl.DataFrame:
        records = self._store.select(collection, columns=list(schema))
        return pl.from_dicts(records, schema=schema) if records else pl.DataFrame(schema=schema)

    def get_client_stats(self) -> ClientStats:
        """Count clients per status"""
        frame = self._frame("clients", {"status": pl.Utf8})
        counts = frame.select(
            [pl.len().alias("total")] + _status_counts(ClientStatus)
        ).row(0, named=True)
        return ClientStats(**counts)

    def get_campaign_stats(self) -> CampaignStats:
        """Count campaigns per status and add up their budgets"""
        frame = self._frame("campaigns", {"status": pl.Utf8, "budget": pl.Float64})
        counts = frame.select(
            [pl.len().alias("total")]
            + _status_counts(CampaignStatus)
            + [col("budget").fill_null(0.0).sum().alias("total_budget")]
        ).row(0, named=True)
        return CampaignStats(**counts)

    def get_overview(self) -> DashboardOverview:
        """Client, campaign and recent ROI statistics"""
        return DashboardOverview(
            clients=self.get_client_stats(),
            campaigns=self.get_campaign_stats(),
            roi=self._roi_service.get_summary(settings.DASHBOARD_ROI_LIMIT),
        )

def create_dashboard_service(store: RecordStore) -> DashboardService:
    """
    Create and return a DashboardService instance

    Args:
        store: Record store backing the service

    Returns:
        DashboardService: Configured dashboard service instance
    """
    return DashboardService(store)
