"""Async wrapper around the llm command-line program.

This module runs the external `llm` chat engine as a subprocess. The runner
is created once at startup and shared by every tool that needs it; tests
substitute any object that satisfies the CommandRunner protocol.
"""

import asyncio
import logging
import shutil
from typing import Protocol, Sequence

from llm_architect.errors import ExecutionError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Interface for running the chat engine."""

    def is_available(self) -> bool: ...

    async def execute(
        self, args: Sequence[str], stdin_input: str | None = None
    ) -> str: ...


class LLMCommandRunner:
    """Runs the llm CLI and captures its output.

    Each call spawns a fresh process that inherits the server's environment
    unmodified, so API keys and LLM_USER_PATH configured for the server are
    seen by the CLI. There is no timeout: a hung CLI hangs the call.

    Attributes:
        command: Name or path of the llm executable
    """

    def __init__(self, command: str = "llm") -> None:
        """Initialize the runner.

        Args:
            command: Name or path of the llm executable
        """
        self.command = command
        logger.info(f"LLMCommandRunner initialized with command: {command}")

    def is_available(self) -> bool:
        """Check whether the llm command can be found on PATH.

        Returns:
            bool: True if the command resolves to an executable
        """
        path = shutil.which(self.command)
        logger.debug(f"Resolved {self.command!r} to {path!r}")
        return path is not None

    async def execute(
        self, args: Sequence[str], stdin_input: str | None = None
    ) -> str:
        """Run the llm command and return its trimmed standard output.

        Args:
            args: Arguments passed after the command name
            stdin_input: Optional text written to the process's stdin

        Returns:
            str: Standard output with surrounding whitespace removed

        Raises:
            ExecutionError: If the process cannot start, exits non-zero,
                            or prints nothing
        """
        logger.debug(f"Executing command: args={list(args)}, input={stdin_input!r}")
        try:
            process = await asyncio.create_subprocess_exec(
                self.command,
                *args,
                stdin=asyncio.subprocess.PIPE
                if stdin_input is not None
                else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate(
                stdin_input.encode() if stdin_input is not None else None
            )
        except OSError as e:
            raise ExecutionError(f"Failed to execute LLM command: {e}") from e

        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            raise ExecutionError(
                f"Failed to execute LLM command: exited with status "
                f"{process.returncode}: {details}"
            )

        output = stdout.decode(errors="replace").strip()
        logger.debug(f"Command output: {output!r}")
        if not output:
            raise ExecutionError(
                "Failed to execute LLM command: Command failed to return a response"
            )
        return output
