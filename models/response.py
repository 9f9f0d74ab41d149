"""Response models for API endpoints."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal


class ErrorResponse(BaseModel):
    """Standard error response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ok": False,
                "error": "Invalid request",
                "code": "VALIDATION_ERROR"
            }
        },
    )

    ok: Literal[False] = False
    error: str = Field(..., description="Error message")
    code: Optional[str] = Field(
        default=None,
        description="Error code for programmatic handling"
    )


class HealthResponse(BaseModel):
    """Response model for /health."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "UP",
                "endpoint": "https://my-resource.openai.azure.com/",
                "deploymentName": "gpt-4o",
                "apiKeyStatus": "SET (first 4 chars: 1a2b...)"
            }
        },
    )

    status: Literal["UP"] = "UP"
    endpoint: str = Field(..., description="Configured Azure OpenAI endpoint")
    deployment_name: str = Field(
        ...,
        alias="deploymentName",
        description="Configured chat deployment"
    )
    api_key_status: str = Field(
        ...,
        alias="apiKeyStatus",
        description="Whether an API key is set, with its first characters"
    )
