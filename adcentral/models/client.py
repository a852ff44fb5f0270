"""
Client SQLAlchemy model
"""
from uuid import uuid4
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Text, DateTime, CheckConstraint, Index
from sqlalchemy.orm import relationship
from adcentral.models import Base


def new_record_id() -> str:
    """Opaque identifier assigned to every stored record"""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Client(Base):
    """SQLAlchemy model for agency clients"""
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=new_record_id)
    name = Column(String(255), nullable=False)
    niche = Column(String(255), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(64), nullable=True)
    monthly_budget = Column(Float, nullable=True)
    goals = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default="active")
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=True, onupdate=utc_now)

    campaigns = relationship(
        "Campaign",
        back_populates="client",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("monthly_budget IS NULL OR monthly_budget >= 0", name="check_client_budget_non_negative"),
        CheckConstraint("status IN ('active', 'paused', 'closed')", name="check_client_status"),
        Index("idx_clients_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name={self.name!r}, status={self.status})>"

    def to_dict(self) -> dict:
        """Convert model instance to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "niche": self.niche,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "monthly_budget": self.monthly_budget,
            "goals": self.goals,
            "notes": self.notes,
            "status": self.status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
