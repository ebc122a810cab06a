"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject common dependencies like settings and the
tool dispatcher.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from llm_architect.config import ArchitectServerSettings
from llm_architect.tools import ToolDispatcher


@lru_cache
def get_settings() -> ArchitectServerSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the ARCHITECT_ prefix.

    Returns:
        ArchitectServerSettings: The application configuration settings.
    """
    return ArchitectServerSettings()


def get_dispatcher(request: Request) -> ToolDispatcher:
    """Get the tool dispatcher from app state.

    This function retrieves the ToolDispatcher instance that was created
    during application startup and stored in app.state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolDispatcher: The tool dispatcher instance.

    Raises:
        HTTPException: If the dispatcher is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "dispatcher"):
        raise HTTPException(
            status_code=503,
            detail="Tool dispatcher not initialized",
        )
    return request.app.state.dispatcher
