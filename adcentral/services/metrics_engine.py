"""
Metrics Engine - ROI/CAC projections for advertising campaigns
Pure functions over calculator inputs plus Polars aggregations over history
"""
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import polars as pl
from polars import col

from adcentral.core.errors import (
    MetricsValidationError,
    MissingField,
    InvalidValue,
    DivisionUndefined,
)
from adcentral.models.metrics_schema import (
    MetricsInput,
    MetricsResult,
    MetricsHistoryRecord,
    AggregateStats,
    PerformancePoint,
)

__all__ = [
    "BREAKEVEN_MARGIN",
    "TARGET_ROI_PERCENT",
    "MetricsValidationError",
    "MissingField",
    "InvalidValue",
    "DivisionUndefined",
    "round_half_away_from_zero",
    "validate_input",
    "compute_metrics",
    "build_history_record",
    "input_from_record",
    "summarize",
    "performance_series",
]

# Contribution margin assumed for every breakeven projection (30% of ticket)
BREAKEVEN_MARGIN = 0.30

# ROI the agency uses as benchmark on the performance chart
TARGET_ROI_PERCENT = 200.0

HistoryRow = Union[Mapping[str, Any], MetricsHistoryRecord]

_SUMMARY_SCHEMA = {
    "roi": pl.Float64,
    "revenue": pl.Float64,
    "investment": pl.Float64,
}


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (0.5 -> 1, -0.5 -> -1)"""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # compare the fraction, abs(x) + 0.5 can round up to the next integer
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _is_positive(value: Optional[float]) -> bool:
    # NaN compares False, so it is rejected together with zero and negatives
    return value is not None and value > 0


def _check_finite(field: str, value: Optional[float]) -> None:
    if value is not None and not math.isfinite(value):
        raise InvalidValue(field, "must be a finite number")


def validate_input(metrics_input: MetricsInput) -> None:
    """
    Check calculator input, failing on the first problem found

    Raises:
        MissingField: investment, ticket or conversion_rate absent or not positive
        InvalidValue: an input is infinite or target_revenue negative
    """
    if not _is_positive(metrics_input.investment):
        raise MissingField("investment")
    _check_finite("investment", metrics_input.investment)
    if not _is_positive(metrics_input.average_ticket):
        raise MissingField("ticket")
    _check_finite("ticket", metrics_input.average_ticket)
    if not _is_positive(metrics_input.conversion_rate_percent):
        raise MissingField("conversion_rate")
    _check_finite("conversion_rate", metrics_input.conversion_rate_percent)

    target = metrics_input.target_revenue
    if target is not None and not target >= 0:
        raise InvalidValue("target_revenue", "must be greater than or equal to zero")
    _check_finite("target_revenue", target)


def compute_metrics(metrics_input: MetricsInput) -> MetricsResult:
    """
    Compute ROI/CAC projections for the given campaign economics

    Args:
        metrics_input: Investment, average ticket and conversion rate (percent)

    Returns:
        MetricsResult: Units sold, revenue, ROI, CAC (None when no sale) and breakeven units

    Raises:
        MetricsValidationError: If the input is rejected or a projection leaves
        the float range; nothing is computed
    """
    validate_input(metrics_input)

    investment = metrics_input.investment
    ticket = metrics_input.average_ticket
    conversion_rate = metrics_input.conversion_rate_percent

    projected_sales = (investment / ticket) * (conversion_rate / 100)
    if not math.isfinite(projected_sales):
        raise InvalidValue("investment", "projected sales exceed the representable range")

    units_sold = round_half_away_from_zero(projected_sales)
    revenue = units_sold * ticket
    roi_percent = ((revenue - investment) / investment) * 100
    cost_per_acquisition = investment / units_sold if units_sold > 0 else None
    margin_per_sale = ticket * BREAKEVEN_MARGIN
    breakeven_units = investment / margin_per_sale if margin_per_sale > 0 else math.inf
    if not (math.isfinite(revenue) and math.isfinite(roi_percent) and math.isfinite(breakeven_units)):
        raise InvalidValue("investment", "projected sales exceed the representable range")

    return MetricsResult(
        units_sold=units_sold,
        revenue=revenue,
        roi_percent=roi_percent,
        cost_per_acquisition=cost_per_acquisition,
        breakeven_units=breakeven_units,
    )


def build_history_record(metrics_input: MetricsInput, result: MetricsResult) -> Dict[str, Any]:
    """
    Build the row persisted for a calculation

    The store assigns ``id`` and ``created_at``.
    """
    return {
        "campaign_id": metrics_input.campaign_id or None,
        "investment": metrics_input.investment,
        "ticket": metrics_input.average_ticket,
        "conversion_rate": metrics_input.conversion_rate_percent,
        "target_revenue": metrics_input.target_revenue,
        "sales": result.units_sold,
        "revenue": result.revenue,
        "roi": result.roi_percent,
        "cac": result.cost_per_acquisition,
        "breakeven": result.breakeven_units,
    }


def input_from_record(record: HistoryRow) -> MetricsInput:
    """Rebuild the calculator input stored alongside a history record"""
    row = _as_mapping(record)
    return MetricsInput(
        investment=row.get("investment"),
        ticket=row.get("ticket"),
        conversion_rate=row.get("conversion_rate"),
        target_revenue=row.get("target_revenue"),
        campaign_id=row.get("campaign_id"),
    )


def _as_mapping(record: HistoryRow) -> Mapping[str, Any]:
    if isinstance(record, MetricsHistoryRecord):
        return record.model_dump()
    return record


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise InvalidValue("limit", "must be greater than or equal to zero")


def summarize(records: Sequence[HistoryRow], limit: int) -> AggregateStats:
    """
    Aggregate the most recent calculations

    Args:
        records: History records ordered newest first
        limit: How many of the leading records to aggregate

    Returns:
        AggregateStats: count, mean ROI, total revenue and total investment;
        all zero when there is nothing to aggregate
    """
    _check_limit(limit)
    rows = [_as_mapping(record) for record in list(records)[:limit]]
    if not rows:
        return AggregateStats()

    frame = pl.from_dicts(
        [{name: float(row[name]) for name in _SUMMARY_SCHEMA} for row in rows],
        schema=_SUMMARY_SCHEMA,
    )
    aggregates = frame.select([
        pl.len().alias("count"),
        col("roi").mean().alias("mean_roi"),
        col("revenue").sum().alias("total_revenue"),
        col("investment").sum().alias("total_investment"),
    ]).row(0, named=True)

    return AggregateStats(
        count=aggregates["count"],
        mean_roi=aggregates["mean_roi"] or 0.0,
        total_revenue=aggregates["total_revenue"],
        total_investment=aggregates["total_investment"],
    )


def performance_series(records: Sequence[HistoryRow], limit: int = 5) -> List[PerformancePoint]:
    """
    Compare the most recent calculations against the agency benchmarks

    Target CAC is the share of the ticket covered by the breakeven margin.
    """
    _check_limit(limit)
    points = []
    for index, record in enumerate(list(records)[:limit], start=1):
        row = _as_mapping(record)
        points.append(PerformancePoint(
            label=f"Calculation {index}",
            roi=row["roi"],
            target_roi=TARGET_ROI_PERCENT,
            cac=row.get("cac"),
            target_cac=row["ticket"] * BREAKEVEN_MARGIN,
        ))
    return points
