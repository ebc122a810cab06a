"""llm CLI wrapper and integration layer.

This package runs the external `llm` chat engine as a subprocess and reads
its conversation logs. All interactions are async.
"""

from llm_architect.llm.client import CommandRunner, LLMCommandRunner
from llm_architect.llm.logs import ConversationResolver
from llm_architect.llm.types import LogEntry

__all__ = ["CommandRunner", "ConversationResolver", "LLMCommandRunner", "LogEntry"]
