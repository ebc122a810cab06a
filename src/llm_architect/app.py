"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llm_architect._version import __version__
from llm_architect.config import ArchitectServerSettings
from llm_architect.llm import LLMCommandRunner
from llm_architect.routers import health, tools
from llm_architect.tools import ToolDispatcher, build_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The llm runner, the tool registry and the dispatcher are created once at
    startup and stored in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: ArchitectServerSettings = app.state.settings
    runner = LLMCommandRunner(command=settings.llm_command)
    app.state.llm_runner = runner

    if runner.is_available():
        logger.info(f"Found llm command: {settings.llm_command}")
    else:
        logger.warning(
            f"llm command '{settings.llm_command}' not found on PATH - "
            "tool calls will fail until it is installed"
        )

    registry = build_registry(runner)
    app.state.tool_registry = registry
    app.state.dispatcher = ToolDispatcher(registry)

    yield

    logger.info("llm-architect shutting down")


def create_app(settings: ArchitectServerSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept an optional
    settings object for testing or explicit configuration.

    Args:
        settings: Optional ArchitectServerSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from llm_architect.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="llm-architect",
        description="Tool server for architectural design feedback via the llm CLI",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tools.router)

    return app
