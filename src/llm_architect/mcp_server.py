"""MCP stdio transport for llm-architect.

This module exposes the same tool dispatcher as the HTTP API over the Model
Context Protocol, so MCP clients can launch the server as a subprocess and
talk to it over stdin/stdout.
"""

import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from llm_architect._version import __version__
from llm_architect.config import ArchitectServerSettings
from llm_architect.llm import LLMCommandRunner
from llm_architect.tools import ToolDispatcher, build_registry

logger = logging.getLogger(__name__)


def create_mcp_server(
    dispatcher: ToolDispatcher, name: str = "llm-architect"
) -> Server:
    """Create an MCP server whose handlers delegate to the dispatcher.

    A failing tool call is raised out of the call_tool handler, which the MCP
    SDK reports to the client as a result with isError set.

    Args:
        dispatcher: The tool dispatcher to expose
        name: Server name reported during MCP initialization

    Returns:
        Server: The configured (not yet running) MCP server
    """
    server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema,
            )
            for descriptor in dispatcher.list_tools()
        ]

    # Arguments are validated by the tool itself, not by the SDK
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        result = await dispatcher.call_tool(name, arguments)
        return [TextContent(type="text", text=item.text) for item in result.content]

    return server


async def run_stdio(settings: ArchitectServerSettings) -> None:
    """Serve the tools over MCP stdio until the client disconnects.

    Args:
        settings: Application settings
    """
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    runner = LLMCommandRunner(command=settings.llm_command)
    if not runner.is_available():
        logger.warning(f"llm command '{settings.llm_command}' not found on PATH")

    dispatcher = ToolDispatcher(build_registry(runner))
    server = create_mcp_server(dispatcher, name=settings.server_name)

    logger.info("MCP server started")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )
