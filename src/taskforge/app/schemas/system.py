"""Common system-level response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RootResponse(BaseModel):
    """Metadata payload returned by the root endpoint."""

    name: str = Field(description="Human-friendly service name")
    environment: str = Field(description="Deployment environment identifier")
    version: str = Field(description="Semantic version of the service")
    api_prefix: str = Field(description="Base path for API routes")


class HealthCheckResponse(BaseModel):
    """Payload returned by the health check endpoint."""

    status: str = Field(default="ok", description="Service health indicator")
    database: str = Field(default="ok", description="Result of the database round trip")


class FieldErrorDetail(BaseModel):
    """A single rejected input field."""

    model_config = ConfigDict(populate_by_name=True)

    field: str = Field(description="Dotted path of the offending field")
    rejected_value: str | None = Field(default=None, alias="rejectedValue")
    message: str


class ErrorResponse(BaseModel):
    """Uniform error document returned for every failed request."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "timestamp": "2024-05-01T09:30:00Z",
                "status": 404,
                "error": "Not Found",
                "message": "Task not found!",
                "path": "/api/tasks/42",
                "traceId": "1b4e28ba-2fa1-4d2b-883f-0016d3cca427",
                "service": "TaskForge",
            }
        },
    )

    timestamp: datetime
    status: int
    error: str = Field(description="HTTP reason phrase")
    message: str
    path: str
    trace_id: str = Field(alias="traceId", description="Random id minted for this response")
    service: str
    errors: list[FieldErrorDetail] | None = Field(
        default=None,
        description="Field-level detail for validation failures.",
    )
    request_id: str | None = Field(default=None, alias="requestId")


__all__ = ["ErrorResponse", "FieldErrorDetail", "HealthCheckResponse", "RootResponse"]
