"""
Application configuration settings
"""
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    """Application settings"""

    PROJECT_NAME: str = "AdCentral API"
    PROJECT_DESCRIPTION: str = "Clients, campaigns and ROI/CAC projections for marketing agencies"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Database settings
    APP_DATABASE_URL: Optional[str] = None

    # ROI calculator settings
    ROI_HISTORY_LIMIT: int = 10
    DASHBOARD_ROI_LIMIT: int = 5
    PERFORMANCE_CHART_LIMIT: int = 5
    CURRENCY_SYMBOL: str = "R$"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra environment variables

settings = Settings()
