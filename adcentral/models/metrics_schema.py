"""
Pydantic schemas for the ROI/CAC calculator
"""
import math
from datetime import datetime
from typing import Optional, Dict
from adcentral.core.errors import DivisionUndefined
from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
)


class MetricsInput(BaseModel):
    """
    Campaign economics entered by the user

    Required fields are declared optional so that the metrics engine, not
    the parser, decides which one is missing and reports it by name.
    """
    investment: Optional[float] = Field(
        None,
        description="Advertising spend in currency units (must be positive)"
    )
    average_ticket: Optional[float] = Field(
        None,
        alias="ticket",
        description="Average revenue per sale (must be positive)"
    )
    conversion_rate_percent: Optional[float] = Field(
        None,
        alias="conversion_rate",
        description="Conversion rate as percentage, e.g. 2.5 for 2.5%"
    )
    target_revenue: Optional[float] = Field(
        None,
        description="Revenue goal, stored for reference only"
    )
    campaign_id: Optional[str] = Field(
        None,
        description="Campaign this simulation belongs to"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "investment": 10000.0,
                "ticket": 500.0,
                "conversion_rate": 2.5,
                "target_revenue": 50000.0,
                "campaign_id": None
            }
        }
    )


class MetricsResult(BaseModel):
    """Metrics derived from a MetricsInput"""
    units_sold: int = Field(..., ge=0, description="Projected number of sales")
    revenue: float = Field(..., ge=0, description="Projected revenue")
    roi_percent: float = Field(..., description="Return on investment percentage, may be negative")
    cost_per_acquisition: Optional[float] = Field(
        None,
        description="Customer acquisition cost; null when no sale is projected"
    )
    breakeven_units: float = Field(..., description="Sales needed to recover the investment")

    model_config = ConfigDict(frozen=True)

    @property
    def cac_undefined(self) -> bool:
        """True when zero projected sales leave the CAC without a value"""
        return self.cost_per_acquisition is None

    @property
    def breakeven_units_rounded(self) -> int:
        """Whole sales needed to break even"""
        return math.ceil(self.breakeven_units)

    def require_cac(self) -> float:
        """Return the CAC, raising DivisionUndefined when it has no value"""
        if self.cost_per_acquisition is None:
            raise DivisionUndefined()
        return self.cost_per_acquisition


class MetricsHistoryRecord(BaseModel):
    """A persisted calculation: inputs, computed metrics, id and timestamp"""
    id: str
    campaign_id: Optional[str] = None
    investment: float
    ticket: float
    conversion_rate: float
    target_revenue: Optional[float] = None
    sales: int
    revenue: float
    roi: float
    cac: Optional[float] = None
    breakeven: Optional[float] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MetricsDisplay(BaseModel):
    """Formatted values for presentation"""
    sales: str
    revenue: str
    roi: str
    cac: str
    breakeven: str


class CalculationResponse(BaseModel):
    """Response of a calculation request"""
    result: MetricsResult
    record: Optional[MetricsHistoryRecord] = None
    display: MetricsDisplay


class AggregateStats(BaseModel):
    """Aggregates over the most recent calculations"""
    count: int = 0
    mean_roi: float = 0.0
    total_revenue: float = 0.0
    total_investment: float = 0.0


class PerformancePoint(BaseModel):
    """One calculation compared against the agency benchmarks"""
    label: str
    roi: float
    target_roi: float
    cac: Optional[float] = None
    target_cac: float


class ValidationErrorDetail(BaseModel):
    """Error payload returned for rejected calculator input"""
    error: str
    field: str
    message: str

    @classmethod
    def from_exception(cls, exc) -> "ValidationErrorDetail":
        return cls(error=type(exc).__name__, field=exc.field, message=str(exc))

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump()
