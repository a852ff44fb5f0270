"""
Health check models
"""
from pydantic import BaseModel, Field
from typing import Dict, Any
from datetime import datetime

class HealthResponse(BaseModel):
    """Health check response model"""
    status: str = Field(..., description="'healthy' or 'degraded'")
    timestamp: datetime
    version: str
    details: Dict[str, Any] = Field(default_factory=dict)
