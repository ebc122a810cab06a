"""Registry of the tools a server exposes."""

import logging

from llm_architect.errors import DuplicateToolError, ToolNotFoundError
from llm_architect.llm.client import CommandRunner
from llm_architect.tools.architect import ArchitectTool
from llm_architect.tools.base import Tool, ToolMetadata

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Holds tools by name, in registration order.

    The registry is built once by the composition root (see `app.py` and
    `mcp_server.py`) and handed to the dispatcher; it is not a global.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool under its metadata name.

        Raises:
            DuplicateToolError: If a tool with the same name is already registered
        """
        name = tool.get_metadata().name
        if name in self._tools:
            raise DuplicateToolError(f"Tool '{name}' is already registered")
        self._tools[name] = tool
        logger.debug(f"Registered tool: {name}")

    def get_all(self) -> list[ToolMetadata]:
        """Return the metadata of every registered tool, in registration order."""
        return [tool.get_metadata() for tool in self._tools.values()]

    def get(self, name: str) -> Tool:
        """Look up a tool by name.

        Raises:
            ToolNotFoundError: If no tool is registered under `name`
        """
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{name}' not found") from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(runner: CommandRunner) -> ToolRegistry:
    """Create a registry holding the built-in tools."""
    registry = ToolRegistry()
    registry.register(ArchitectTool(runner))
    logger.info(f"Tool registry built with {len(registry)} tool(s)")
    return registry
