"""Tool definitions, registry and dispatch layer.

This package provides the `architect` tool, the registry that holds it, and
the dispatcher that turns transport requests into tool calls.
"""

from llm_architect.tools.architect import (
    ArchitectInput,
    ArchitectResult,
    ArchitectTool,
    normalize_prompt,
)
from llm_architect.tools.base import Tool, ToolMetadata
from llm_architect.tools.dispatcher import ToolDispatcher, to_wire_schema
from llm_architect.tools.registry import ToolRegistry, build_registry

__all__ = [
    "ArchitectInput",
    "ArchitectResult",
    "ArchitectTool",
    "Tool",
    "ToolDispatcher",
    "ToolMetadata",
    "ToolRegistry",
    "build_registry",
    "normalize_prompt",
    "to_wire_schema",
]
