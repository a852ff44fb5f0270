"""
Status enums for clients and campaigns
"""
from enum import Enum

class ClientStatus(str, Enum):
    """Lifecycle of an agency client"""
    ACTIVE = "active"
    PAUSED = "paused"
    CLOSED = "closed"

class CampaignStatus(str, Enum):
    """Lifecycle of an advertising campaign"""
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
