from pydantic import ConfigDict

from src.schemas.common import CamelModel


class WelcomeInfo(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Welcome to Docker Learning App!",
                "version": "1.0.0",
                "environment": "development",
                "container": "unknown",
            }
        }
    )

    message: str
    version: str
    environment: str
    container: str  # HOSTNAME inside a container, i.e. the short container id


class RuntimeInfo(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "runtimeVersion": "3.12.4",
                "platform": "linux",
                "memory": {"rss": 48234496, "maxRss": 48234496},
                "uptimeSeconds": 42.17,
            }
        }
    )

    runtime_version: str
    platform: str
    memory: dict[str, int]  # metric name -> bytes
    uptime_seconds: float
