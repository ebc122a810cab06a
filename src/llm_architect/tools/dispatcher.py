"""Dispatching of tool calls to registered tools.

The dispatcher is transport-agnostic: both the FastAPI router and the MCP
stdio server delegate to it and only translate its return values and
ToolExecutionError into their own envelopes.
"""

import logging
from typing import Any

from pydantic import BaseModel

from llm_architect.errors import ToolExecutionError
from llm_architect.models.tools import TextContent, ToolCallResult, ToolDescriptor
from llm_architect.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def to_wire_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Convert a pydantic input model to the JSON schema advertised to clients.

    Pydantic's generated `title` entries are dropped and `required` is always
    present, so a schema with no required fields still lists `[]`.

    Args:
        model: The tool's input model

    Returns:
        dict: JSON schema of an object with the model's (aliased) fields
    """
    schema = model.model_json_schema(by_alias=True)
    schema.pop("title", None)
    for field_schema in schema.get("properties", {}).values():
        field_schema.pop("title", None)
    schema.setdefault("required", [])
    return schema


class ToolDispatcher:
    """Routes discovery and invocation requests to the tool registry."""

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    def list_tools(self) -> list[ToolDescriptor]:
        """Describe every registered tool, in registration order."""
        return [
            ToolDescriptor(
                name=metadata.name,
                description=metadata.description,
                input_schema=to_wire_schema(metadata.input_model),
            )
            for metadata in self.registry.get_all()
        ]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> ToolCallResult:
        """Invoke the named tool with the raw argument bag.

        Args:
            name: Name of the registered tool
            arguments: Arguments exactly as received from the transport

        Returns:
            ToolCallResult: The tool's text wrapped in a content envelope

        Raises:
            ToolExecutionError: For any failure, including an unknown tool name
        """
        try:
            tool = self.registry.get(name)
            text = await tool.process_input(arguments)
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {e}")
            raise ToolExecutionError(name, e) from e

        logger.debug(f"Tool '{name}' succeeded")
        return ToolCallResult(content=[TextContent(text=text)])
