"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of llm-architect.
        llm_command: The configured llm command, if the runner is initialized.
        llm_available: Whether the llm command was found on PATH.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of llm-architect")
    llm_command: str | None = Field(
        default=None,
        description="Configured llm command",
    )
    llm_available: bool | None = Field(
        default=None,
        description="Whether the llm command is on PATH",
    )
