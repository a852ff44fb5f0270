"""
Tests for the metrics engine: formulas, validation, zero-sales CAC and aggregation
"""
import math

import pytest

from adcentral.core.errors import DivisionUndefined, InvalidValue, MissingField
from adcentral.models.metrics_schema import MetricsInput, MetricsHistoryRecord
from adcentral.services.metrics_engine import (
    BREAKEVEN_MARGIN,
    TARGET_ROI_PERCENT,
    build_history_record,
    compute_metrics,
    input_from_record,
    performance_series,
    round_half_away_from_zero,
    summarize,
)


def make_input(**overrides):
    values = {"investment": 20000.0, "ticket": 200.0, "conversion_rate": 10.0}
    values.update(overrides)
    return MetricsInput(**values)


class TestComputeMetrics:
    """Formulas and documented examples"""

    def test_half_unit_rounds_up(self):
        result = compute_metrics(make_input(investment=10000, ticket=500, conversion_rate=2.5))

        assert result.units_sold == 1
        assert result.revenue == 500
        assert result.roi_percent == pytest.approx(-95.0)
        assert result.cost_per_acquisition == pytest.approx(10000.0)
        assert result.breakeven_units == pytest.approx(66.6667, rel=1e-4)
        assert result.breakeven_units_rounded == 67

    def test_ten_percent_conversion(self):
        result = compute_metrics(make_input())

        assert result.units_sold == 10
        assert result.revenue == 2000
        assert result.roi_percent == pytest.approx(-90.0)
        assert result.cost_per_acquisition == pytest.approx(2000.0)
        assert result.breakeven_units == pytest.approx(333.3333, rel=1e-4)

    def test_profitable_campaign(self):
        result = compute_metrics(make_input(investment=1000, ticket=100, conversion_rate=50))

        assert result.units_sold == 5
        assert result.revenue == 500
        assert result.roi_percent == pytest.approx(-50.0)

        result = compute_metrics(make_input(investment=1000, ticket=10, conversion_rate=100))
        assert result.units_sold == 100
        assert result.roi_percent == pytest.approx(0.0)

    def test_revenue_is_units_times_ticket(self):
        for ticket in (0.99, 37.5, 149.9, 1234.56):
            metrics_input = make_input(investment=7777.77, ticket=ticket, conversion_rate=33.3)
            result = compute_metrics(metrics_input)
            assert result.revenue == result.units_sold * ticket

    def test_breakeven_uses_fixed_margin(self):
        metrics_input = make_input(investment=12345.0, ticket=321.0, conversion_rate=7.0)
        result = compute_metrics(metrics_input)

        assert BREAKEVEN_MARGIN == 0.30
        assert result.breakeven_units == 12345.0 / (321.0 * 0.3)

    def test_deterministic(self):
        metrics_input = make_input(investment=9876.5, ticket=43.21, conversion_rate=3.7)
        assert compute_metrics(metrics_input) == compute_metrics(metrics_input)

    def test_roi_is_not_clamped(self):
        result = compute_metrics(make_input(investment=100, ticket=1000, conversion_rate=100))
        assert result.units_sold == 0

        result = compute_metrics(make_input(investment=1000, ticket=10, conversion_rate=500))
        assert result.units_sold == 500
        assert result.roi_percent == pytest.approx(400.0)

    def test_accepts_wire_and_field_names(self):
        by_alias = MetricsInput(investment=20000, ticket=200, conversion_rate=10)
        by_name = MetricsInput(investment=20000, average_ticket=200, conversion_rate_percent=10)
        assert compute_metrics(by_alias) == compute_metrics(by_name)


class TestZeroSales:
    """CAC has no value when the projection rounds down to zero sales"""

    def test_cac_sentinel(self):
        result = compute_metrics(make_input(investment=1000, ticket=500, conversion_rate=10))

        assert result.units_sold == 0
        assert result.cost_per_acquisition is None
        assert result.cac_undefined is True
        assert result.revenue == 0
        assert result.roi_percent == -100

    def test_require_cac_raises(self):
        result = compute_metrics(make_input(investment=1000, ticket=500, conversion_rate=10))

        with pytest.raises(DivisionUndefined) as exc_info:
            result.require_cac()
        assert exc_info.value.field == "cac"

    def test_require_cac_returns_value(self):
        result = compute_metrics(make_input())
        assert result.cac_undefined is False
        assert result.require_cac() == pytest.approx(2000.0)


class TestValidation:
    """Fail fast, no partial computation"""

    @pytest.mark.parametrize("field,wire_name", [
        ("investment", "investment"),
        ("ticket", "ticket"),
        ("conversion_rate", "conversion_rate"),
    ])
    @pytest.mark.parametrize("value", [None, 0, -5, float("nan")])
    def test_required_fields(self, field, wire_name, value):
        with pytest.raises(MissingField) as exc_info:
            compute_metrics(make_input(**{wire_name: value}))
        assert exc_info.value.field == field

    def test_first_missing_field_wins(self):
        with pytest.raises(MissingField) as exc_info:
            compute_metrics(MetricsInput())
        assert exc_info.value.field == "investment"

        with pytest.raises(MissingField) as exc_info:
            compute_metrics(MetricsInput(investment=100))
        assert exc_info.value.field == "ticket"

    def test_negative_target_revenue(self):
        with pytest.raises(InvalidValue) as exc_info:
            compute_metrics(make_input(target_revenue=-1))
        assert exc_info.value.field == "target_revenue"

    def test_target_revenue_does_not_change_metrics(self):
        assert compute_metrics(make_input(target_revenue=0)) == compute_metrics(make_input())
        assert compute_metrics(make_input(target_revenue=50000)) == compute_metrics(make_input())

    def test_no_upper_bound(self):
        result = compute_metrics(make_input(conversion_rate=250))
        assert result.units_sold == 250

    @pytest.mark.parametrize("field,wire_name", [
        ("investment", "investment"),
        ("ticket", "ticket"),
        ("conversion_rate", "conversion_rate"),
        ("target_revenue", "target_revenue"),
    ])
    def test_infinite_input(self, field, wire_name):
        with pytest.raises(InvalidValue) as exc_info:
            compute_metrics(make_input(**{wire_name: float("inf")}))
        assert exc_info.value.field == field

    def test_projection_beyond_float_range(self):
        with pytest.raises(InvalidValue) as exc_info:
            compute_metrics(make_input(investment=1e300, ticket=1e-10, conversion_rate=100))
        assert exc_info.value.field == "investment"
        assert "representable range" in str(exc_info.value)

    def test_breakeven_with_underflowing_margin(self):
        with pytest.raises(InvalidValue):
            compute_metrics(make_input(investment=5e-324, ticket=5e-324, conversion_rate=10))


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0),
        (0.49, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4999, 2),
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (-0.5, -1),
        (-2.5, -3),
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected


class TestHistoryRecord:

    def test_record_shape(self):
        metrics_input = make_input(target_revenue=50000, campaign_id="c-1")
        result = compute_metrics(metrics_input)

        record = build_history_record(metrics_input, result)

        assert record == {
            "campaign_id": "c-1",
            "investment": 20000.0,
            "ticket": 200.0,
            "conversion_rate": 10.0,
            "target_revenue": 50000.0,
            "sales": 10,
            "revenue": 2000.0,
            "roi": result.roi_percent,
            "cac": result.cost_per_acquisition,
            "breakeven": result.breakeven_units,
        }

    def test_zero_sales_record_has_null_cac(self):
        metrics_input = make_input(investment=1000, ticket=500, conversion_rate=10)
        record = build_history_record(metrics_input, compute_metrics(metrics_input))

        assert record["cac"] is None
        assert record["campaign_id"] is None
        assert record["target_revenue"] is None

    def test_record_inputs_reproduce_result(self):
        metrics_input = make_input(investment=5432.1, ticket=87.6, conversion_rate=4.2)
        result = compute_metrics(metrics_input)
        record = build_history_record(metrics_input, result)

        assert compute_metrics(input_from_record(record)) == result


class TestSummarize:

    def test_empty(self):
        stats = summarize([], 5)

        assert stats.count == 0
        assert stats.mean_roi == 0
        assert stats.total_revenue == 0
        assert stats.total_investment == 0

    def test_aggregates(self):
        records = [
            {"roi": -90.0, "revenue": 2000.0, "investment": 20000.0},
            {"roi": 50.0, "revenue": 1500.0, "investment": 1000.0},
            {"roi": 10.0, "revenue": 1100.0, "investment": 1000.0},
        ]

        stats = summarize(records, 5)

        assert stats.count == 3
        assert stats.mean_roi == pytest.approx(-10.0)
        assert stats.total_revenue == pytest.approx(4600.0)
        assert stats.total_investment == pytest.approx(22000.0)

    def test_limit_takes_leading_records(self):
        records = [
            {"roi": 100.0, "revenue": 10.0, "investment": 5.0},
            {"roi": 0.0, "revenue": 20.0, "investment": 20.0},
            {"roi": -100.0, "revenue": 0.0, "investment": 30.0},
        ]

        stats = summarize(records, 2)

        assert stats.count == 2
        assert stats.mean_roi == pytest.approx(50.0)
        assert stats.total_investment == pytest.approx(25.0)
        assert summarize(records, 0).count == 0

    def test_negative_limit(self):
        with pytest.raises(InvalidValue):
            summarize([], -1)

    def test_accepts_history_records(self, base_time):
        record = MetricsHistoryRecord(
            id="r-1",
            investment=100.0,
            ticket=10.0,
            conversion_rate=50.0,
            sales=5,
            revenue=50.0,
            roi=-50.0,
            cac=20.0,
            breakeven=100.0 / 3.0,
            created_at=base_time,
        )

        stats = summarize([record], 5)

        assert stats.count == 1
        assert stats.mean_roi == pytest.approx(-50.0)


class TestPerformanceSeries:

    def test_benchmarks(self):
        records = [
            {"roi": -90.0, "cac": 2000.0, "ticket": 200.0},
            {"roi": -100.0, "cac": None, "ticket": 500.0},
        ]

        points = performance_series(records)

        assert [point.label for point in points] == ["Calculation 1", "Calculation 2"]
        assert points[0].target_roi == TARGET_ROI_PERCENT == 200.0
        assert points[0].target_cac == pytest.approx(60.0)
        assert points[1].cac is None
        assert math.isclose(points[1].target_cac, 150.0)

    def test_limit(self):
        records = [{"roi": float(i), "cac": 1.0, "ticket": 1.0} for i in range(8)]
        assert len(performance_series(records, 5)) == 5
        assert len(performance_series(records, 10)) == 8
