"""
Pydantic schemas for campaign validation
"""
from datetime import date as Date, datetime
from typing import List, Optional
from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    field_validator,
    model_validator,
)
from adcentral.enums.status import CampaignStatus
from adcentral.enums.platform import Platform

class CampaignBase(BaseModel):
    """Base campaign schema with shared attributes"""
    client_id: str = Field(..., description="Owning client")
    name: str = Field(..., min_length=1, max_length=255, description="Campaign name")
    objective: Optional[str] = Field(None, description="Campaign objective")
    budget: Optional[float] = Field(
        None,
        ge=0,
        description="Total budget (non-negative)"
    )
    audience: Optional[str] = Field(None, description="Target audience")
    platforms: List[Platform] = Field(default_factory=list, description="Advertising platforms")
    creatives: List[str] = Field(default_factory=list, description="Creative descriptions or links")
    start_date: Optional[Date] = Field(None, description="First day of the campaign")
    end_date: Optional[Date] = Field(None, description="Last day of the campaign")
    status: CampaignStatus = Field(CampaignStatus.DRAFT, description="Campaign status")
    notes: Optional[str] = Field(None, description="Free-form notes")

    model_config = ConfigDict(use_enum_values=True)

    @field_validator('creatives')
    @classmethod
    def validate_creatives(cls, v):
        """Drop blank creatives"""
        return [creative.strip() for creative in v if creative and creative.strip()]

    @model_validator(mode='after')
    def validate_dates(self):
        """Validate that the campaign does not end before it starts"""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError('end_date must not be earlier than start_date')
        return self

class CampaignCreate(CampaignBase):
    """Schema for creating campaigns"""
    pass

class CampaignUpdate(BaseModel):
    """Schema for updating campaigns (all fields optional)"""
    client_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    objective: Optional[str] = None
    budget: Optional[float] = Field(None, ge=0)
    audience: Optional[str] = None
    platforms: Optional[List[Platform]] = None
    creatives: Optional[List[str]] = None
    start_date: Optional[Date] = None
    end_date: Optional[Date] = None
    status: Optional[CampaignStatus] = None
    notes: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator('client_id', 'name', 'status', 'platforms')
    @classmethod
    def reject_null(cls, v, info):
        """Required columns may be omitted but not cleared"""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator('creatives')
    @classmethod
    def validate_creatives(cls, v):
        """Drop blank creatives"""
        if v is None:
            raise ValueError("creatives cannot be null")
        return [creative.strip() for creative in v if creative and creative.strip()]

class CampaignResponse(CampaignBase):
    """Schema for campaign response"""
    id: str
    client_name: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class CampaignOption(BaseModel):
    """Minimal campaign representation for selection lists"""
    id: str
    name: str
