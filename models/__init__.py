"""Data models for request/response validation."""
from models.request import ChatRequest, SimpleChatRequest
from models.response import ErrorResponse, HealthResponse

__all__ = [
    # Requests
    "ChatRequest",
    "SimpleChatRequest",
    # Responses
    "ErrorResponse",
    "HealthResponse",
]
