"""
Health service with business logic
"""
from datetime import datetime, timezone
from adcentral.models.health import HealthResponse
from adcentral.core.config import settings
from adcentral.db.database import check_database_connection

class HealthService:
    """Health service for handling health checks"""

    def get_health_status(self) -> HealthResponse:
        """Get basic health status"""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=settings.VERSION
        )

    def get_detailed_health_status(self) -> HealthResponse:
        """Get health status including a database check"""
        database_ok = check_database_connection()
        details = {
            "database": "connected" if database_ok else "unavailable",
            "project": settings.PROJECT_NAME,
        }

        return HealthResponse(
            status="healthy" if database_ok else "degraded",
            timestamp=datetime.now(timezone.utc),
            version=settings.VERSION,
            details=details
        )
