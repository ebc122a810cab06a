"""llm-architect: tool server for architectural design feedback via the llm CLI.

This package exposes schema-validated tools over HTTP (FastAPI) and MCP
stdio, and drives the external `llm` chat engine while preserving its
conversation ids across stateless calls.
"""

from llm_architect._version import __version__
from llm_architect.app import create_app

__all__ = ["create_app", "__version__"]
