"""
Dashboard response models
"""
from pydantic import BaseModel
from adcentral.models.metrics_schema import AggregateStats

class ClientStats(BaseModel):
    """Client counts per status"""
    total: int = 0
    active: int = 0
    paused: int = 0
    closed: int = 0

class CampaignStats(BaseModel):
    """Campaign counts per status and budget total"""
    total: int = 0
    active: int = 0
    draft: int = 0
    paused: int = 0
    completed: int = 0
    total_budget: float = 0.0

class DashboardOverview(BaseModel):
    """Everything shown on the dashboard"""
    clients: ClientStats
    campaigns: CampaignStats
    roi: AggregateStats
