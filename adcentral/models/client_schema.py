"""
Client Pydantic models for API requests and responses
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from adcentral.enums.status import ClientStatus

class ClientBase(BaseModel):
    """Base client model with shared attributes"""
    name: str = Field(..., min_length=1, max_length=255, description="Client name")
    niche: Optional[str] = Field(None, description="Market niche")
    contact_email: Optional[EmailStr] = Field(None, description="Contact e-mail")
    contact_phone: Optional[str] = Field(None, max_length=64, description="Contact phone")
    monthly_budget: Optional[float] = Field(None, ge=0, description="Monthly advertising budget")
    goals: Optional[str] = Field(None, description="Business goals")
    notes: Optional[str] = Field(None, description="Free-form notes")
    status: ClientStatus = Field(ClientStatus.ACTIVE, description="Client status")

    model_config = ConfigDict(use_enum_values=True)

class ClientCreate(ClientBase):
    """Client creation model"""
    pass

class ClientUpdate(BaseModel):
    """Client update model with optional fields"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    niche: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=64)
    monthly_budget: Optional[float] = Field(None, ge=0)
    goals: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[ClientStatus] = None

    model_config = ConfigDict(use_enum_values=True)

    @field_validator('name', 'status')
    @classmethod
    def reject_null(cls, v, info):
        """Required columns may be omitted but not cleared"""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

class ClientResponse(ClientBase):
    """Client response model"""
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "id": "3f1c8a52-8f4e-4b59-9d0b-2f6f7f2f0a11",
                "name": "Padaria Central",
                "niche": "Food & Beverage",
                "contact_email": "contato@padariacentral.com.br",
                "contact_phone": "+55 11 99999-0000",
                "monthly_budget": 5000.0,
                "goals": "Increase delivery orders",
                "notes": None,
                "status": "active",
                "created_at": "2025-01-10T12:00:00",
                "updated_at": None
            }
        }
    )

class ClientOption(BaseModel):
    """Minimal client representation for selection lists"""
    id: str
    name: str
