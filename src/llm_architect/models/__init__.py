"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing tool discovery and invocation requests and responses.
"""

from llm_architect.models.health import HealthResponse
from llm_architect.models.tools import (
    TextContent,
    ToolCallRequest,
    ToolCallResult,
    ToolDescriptor,
    ToolListResponse,
)

__all__ = [
    "HealthResponse",
    "TextContent",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolDescriptor",
    "ToolListResponse",
]
