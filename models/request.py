"""Request models for API validation."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class ChatRequest(BaseModel):
    """Request model for the /api/chat/detailed endpoint."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userMessage": "What is Azure OpenAI?",
                "systemMessage": "You are a helpful assistant.",
                "temperature": 0.7
            }
        },
    )

    user_message: str = Field(
        ...,
        alias="userMessage",
        min_length=1,
        description="User message text"
    )
    system_message: Optional[str] = Field(
        default=None,
        alias="systemMessage",
        description="Optional system instructions"
    )
    temperature: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for this call"
    )

    @field_validator('user_message')
    @classmethod
    def user_message_not_empty(cls, v):
        """Ensure the user message is not just whitespace."""
        if not v or not v.strip():
            raise ValueError('userMessage cannot be empty or only whitespace')
        return v

    @field_validator('system_message')
    @classmethod
    def system_message_blank_to_none(cls, v):
        """Treat a blank system message as absent."""
        if v is not None and not v.strip():
            return None
        return v


class SimpleChatRequest(BaseModel):
    """Request model for the /api/chat/simple endpoint (raw text body)."""

    message: str = Field(..., min_length=1, description="User message text")

    @field_validator('message')
    @classmethod
    def message_not_empty(cls, v):
        """Ensure the message is not just whitespace."""
        if not v or not v.strip():
            raise ValueError('Message cannot be empty or only whitespace')
        return v
