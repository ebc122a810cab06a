"""Pydantic models for tool discovery and invocation.

This module contains the envelopes returned by the dispatcher and the
request and response schemas for the /api/v1/tools endpoints.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """A tool as advertised to clients.

    Attributes:
        name: Unique tool name
        description: Human-readable description of what the tool does
        input_schema: JSON schema of the tool's arguments
    """

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="What the tool does")
    input_schema: dict[str, Any] = Field(
        ...,
        alias="inputSchema",
        description="JSON schema of the tool's arguments",
    )

    model_config = ConfigDict(populate_by_name=True)


class ToolListResponse(BaseModel):
    """Response model for listing all registered tools."""

    tools: list[ToolDescriptor] = Field(..., description="Registered tools")


class TextContent(BaseModel):
    """A single text item of a tool result."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text produced by the tool")


class ToolCallResult(BaseModel):
    """Successful result of a tool call.

    Failures are never represented here; they are raised as errors.
    """

    content: list[TextContent] = Field(..., description="Result content items")
    is_error: bool = Field(default=False, alias="isError")

    model_config = ConfigDict(populate_by_name=True)


class ToolCallRequest(BaseModel):
    """Request body for POST /api/v1/tools/{name}/call.

    Arguments are passed to the tool untouched; the tool validates them.
    """

    arguments: dict[str, Any] = Field(
        default_factory=dict,
        description="Tool arguments",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "arguments": {
                    "input": "Design a cache for a read-heavy API",
                    "conversationId": "01j9x6m3q2d1f5c8b7a6e4h2k0",
                }
            }
        }
    )
