"""Tools router for tool discovery and invocation.

This module exposes the tool dispatcher over HTTP. A failed call is always
reported as an HTTP error, never as a 200 response carrying error text.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from llm_architect.dependencies import get_dispatcher
from llm_architect.errors import (
    ConversationStateError,
    DependencyMissingError,
    ExecutionError,
    InvalidInputError,
    LogParseError,
    ToolExecutionError,
    ToolNotFoundError,
)
from llm_architect.models.tools import (
    ToolCallRequest,
    ToolCallResult,
    ToolListResponse,
)
from llm_architect.tools import ToolDispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["tools"])

_STATUS_CODES: list[tuple[type[Exception], int]] = [
    (ToolNotFoundError, 404),
    (InvalidInputError, 422),
    (DependencyMissingError, 503),
    (ExecutionError, 502),
    (LogParseError, 502),
    (ConversationStateError, 502),
]


def status_code_for(error: ToolExecutionError) -> int:
    """Pick the HTTP status code for a failed tool call.

    Args:
        error: The dispatcher's error, wrapping the original cause.

    Returns:
        int: HTTP status code (500 for unclassified failures).
    """
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error.cause, error_type):
            return status_code
    return 500


@router.get("/tools", response_model=ToolListResponse)
async def list_tools(
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
) -> ToolListResponse:
    """List all registered tools with their input schemas.

    Args:
        dispatcher: The tool dispatcher (injected).

    Returns:
        ToolListResponse: Registered tools in registration order.
    """
    tools = dispatcher.list_tools()
    logger.debug(f"Listed {len(tools)} tools")
    return ToolListResponse(tools=tools)


@router.post("/tools/{tool_name}/call", response_model=ToolCallResult)
async def call_tool(
    tool_name: str,
    request: ToolCallRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
) -> ToolCallResult:
    """Invoke a tool.

    Args:
        tool_name: Name of the tool to call.
        request: Request body with the tool arguments.
        dispatcher: The tool dispatcher (injected).

    Returns:
        ToolCallResult: The tool's text result.

    Raises:
        HTTPException: 404 unknown tool, 422 invalid arguments, 503 llm missing,
                       502 llm failure, 500 anything else.
    """
    try:
        return await dispatcher.call_tool(tool_name, request.arguments)
    except ToolExecutionError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))
