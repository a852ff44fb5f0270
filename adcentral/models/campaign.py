"""
Campaign SQLAlchemy model
"""
from sqlalchemy import Column, String, Float, Text, Date, DateTime, JSON, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from adcentral.models import Base
from adcentral.models.client import new_record_id, utc_now


class Campaign(Base):
    """SQLAlchemy model for advertising campaigns"""
    __tablename__ = "campaigns"

    id = Column(String(36), primary_key=True, default=new_record_id)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    objective = Column(Text, nullable=True)
    budget = Column(Float, nullable=True)
    audience = Column(Text, nullable=True)
    platforms = Column(JSON, nullable=True, default=list)
    creatives = Column(JSON, nullable=True, default=list)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    status = Column(String(16), nullable=False, default="draft")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now)

    client = relationship("Client", back_populates="campaigns")

    # History records go away with their campaign
    roi_calculations = relationship(
        "RoiCalculation",
        back_populates="campaign",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("budget IS NULL OR budget >= 0", name="check_campaign_budget_non_negative"),
        CheckConstraint("status IN ('draft', 'active', 'paused', 'completed')", name="check_campaign_status"),
        Index("idx_campaigns_client_id", "client_id"),
        Index("idx_campaigns_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Campaign(id={self.id}, name={self.name!r}, status={self.status})>"

    def to_dict(self) -> dict:
        """Convert model instance to dictionary"""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "name": self.name,
            "objective": self.objective,
            "budget": self.budget,
            "audience": self.audience,
            "platforms": list(self.platforms or []),
            "creatives": list(self.creatives or []),
            "start_date": self.start_date,
            "end_date": self.end_date,
            "status": self.status,
            "notes": self.notes,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
