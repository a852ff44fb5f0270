"""
ROI calculation SQLAlchemy model

Each row is an immutable history entry: the calculator inputs plus the
metrics computed from exactly those inputs.
"""
from sqlalchemy import Column, String, Float, Integer, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from adcentral.models import Base
from adcentral.models.client import new_record_id, utc_now


class RoiCalculation(Base):
    """SQLAlchemy model for ROI/CAC calculation history"""
    __tablename__ = "roi_calculations"

    id = Column(String(36), primary_key=True, default=new_record_id)
    campaign_id = Column(String(36), ForeignKey("campaigns.id", ondelete="CASCADE"), nullable=True)

    # Inputs
    investment = Column(Float, nullable=False, doc="Advertising spend")
    ticket = Column(Float, nullable=False, doc="Average revenue per sale")
    conversion_rate = Column(Float, nullable=False, doc="Conversion rate as percentage")
    target_revenue = Column(Float, nullable=True, doc="Revenue goal, informational only")

    # Computed metrics
    sales = Column(Integer, nullable=False, doc="Projected units sold")
    revenue = Column(Float, nullable=False, doc="Projected revenue")
    roi = Column(Float, nullable=False, doc="Return on investment percentage")
    cac = Column(Float, nullable=True, doc="Customer acquisition cost, NULL when no sales")
    breakeven = Column(Float, nullable=True, doc="Units needed to recover the investment")

    created_at = Column(DateTime, nullable=False, default=utc_now)

    campaign = relationship("Campaign", back_populates="roi_calculations")

    __table_args__ = (
        CheckConstraint("investment > 0", name="check_roi_investment_positive"),
        CheckConstraint("ticket > 0", name="check_roi_ticket_positive"),
        CheckConstraint("conversion_rate > 0", name="check_roi_conversion_rate_positive"),
        CheckConstraint("sales >= 0", name="check_roi_sales_non_negative"),
        Index("idx_roi_calculations_created_at", "created_at"),
        Index("idx_roi_calculations_campaign_id", "campaign_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<RoiCalculation(id={self.id}, "
            f"investment={self.investment:.2f}, "
            f"roi={self.roi:.2f})>"
        )

    def to_dict(self) -> dict:
        """Convert model instance to dictionary"""
        return {
            "id": self.id,
            "campaign_id": self.campaign_id,
            "investment": self.investment,
            "ticket": self.ticket,
            "conversion_rate": self.conversion_rate,
            "target_revenue": self.target_revenue,
            "sales": self.sales,
            "revenue": self.revenue,
            "roi": self.roi,
            "cac": self.cac,
            "breakeven": self.breakeven,
            "created_at": self.created_at,
        }
