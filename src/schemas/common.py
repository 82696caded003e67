from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RouteNotFoundResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Route not found",
                "path": "/foo/bar",
            }
        }
    )

    error: str = "Route not found"
    path: str


class InternalErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Something went wrong!",
                "message": "division by zero",
            }
        }
    )

    error: str = "Something went wrong!"
    message: str
