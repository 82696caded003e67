from datetime import datetime

from pydantic import ConfigDict, Field

from src.schemas.common import CamelModel

RANDOM_UPPER_BOUND = 100


class RandomSample(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "number": 73,
                "timestamp": "2024-01-01T12:00:00.000Z",
            }
        }
    )

    number: int = Field(ge=0, lt=RANDOM_UPPER_BOUND)
    timestamp: datetime
