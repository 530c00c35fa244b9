"""Health check response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "environment": "development",
                "message": "API is healthy",
                "totalUsers": 3,
            }
        },
    )

    status: str
    version: str
    environment: str | None = None
    message: str = "API is healthy"
    total_users: int = Field(0, ge=0)
