from datetime import datetime

from pydantic import ConfigDict

from src.schemas.common import CamelModel


class HealthStatus(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2024-01-01T12:00:00.000Z",
                "uptimeSeconds": 42.17,
            }
        }
    )

    status: str = "healthy"
    timestamp: datetime
    uptime_seconds: float
