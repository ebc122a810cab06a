"""Exception types raised while dispatching and running tools."""


class ArchitectError(Exception):
    """Base class for all llm-architect errors."""


class InvalidInputError(ArchitectError):
    """Raised when tool arguments fail schema validation.

    Attributes:
        errors: One human-readable line per failing field (e.g. "input must not be empty")
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or [message]


class DependencyMissingError(ArchitectError):
    """Raised when the llm command cannot be found on PATH."""


class ExecutionError(ArchitectError):
    """Raised when the llm command fails to run or returns no output."""


class LogParseError(ArchitectError):
    """Raised when `llm logs` output is not a JSON list."""


class ConversationStateError(ArchitectError):
    """Raised when `llm logs` output is well-formed but holds no conversation id."""


class ToolNotFoundError(ArchitectError):
    """Raised when no tool is registered under the requested name."""


class DuplicateToolError(ArchitectError):
    """Raised when registering a tool whose name is already taken."""


class ToolExecutionError(ArchitectError):
    """Raised by the dispatcher when a tool call fails for any reason.

    Attributes:
        tool_name: Name of the tool that was called
        cause: The original exception
    """

    def __init__(self, tool_name: str, cause: Exception) -> None:
        super().__init__(f"Tool execution failed: {cause}")
        self.tool_name = tool_name
        self.cause = cause
