"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from llm_architect._version import __version__
from llm_architect.llm import CommandRunner
from llm_architect.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of llm-architect.
    Also checks whether the llm command is on PATH if the runner is initialized.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    llm_available = None
    llm_command = None

    if hasattr(request.app.state, "llm_runner"):
        runner: CommandRunner = request.app.state.llm_runner
        llm_command = getattr(runner, "command", None)

        try:
            llm_available = runner.is_available()
            logger.debug(f"llm availability check: {llm_available}")
        except Exception as e:
            logger.warning(f"llm availability check failed: {e}")
            llm_available = False

    return HealthResponse(
        status="ok",
        version=__version__,
        llm_command=llm_command,
        llm_available=llm_available,
    )
