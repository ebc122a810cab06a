"""Type definitions for llm CLI integration.

This module contains dataclasses used for representing entries reported
by the `llm logs --json` command.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class LogEntry:
    """One prompt/response turn as recorded by the llm CLI.

    The llm CLI owns the conversation log; this is a read-only view of a
    single entry in it.

    Attributes:
        id: Identifier of the logged response
        conversation_id: Identifier of the conversation the turn belongs to
        prompt: The prompt text that was sent
        response: The response text the model produced
        model: Model that answered (e.g., "gpt-4o-mini")
        datetime_utc: Timestamp string as reported by the CLI
    """

    id: str
    conversation_id: str
    prompt: str
    response: str
    model: str
    datetime_utc: str

    @staticmethod
    def from_log_entry(entry: dict[str, Any]) -> "LogEntry":
        """Create a LogEntry from one element of `llm logs --json` output.

        Missing keys default to empty strings, so callers must check
        `conversation_id` before relying on it.

        Args:
            entry: A single decoded JSON object from the logs listing

        Returns:
            LogEntry: Parsed log entry
        """

        def get_str(key: str) -> str:
            value = entry.get(key)
            return str(value) if value is not None else ""

        return LogEntry(
            id=get_str("id"),
            conversation_id=get_str("conversation_id"),
            prompt=get_str("prompt"),
            response=get_str("response"),
            model=get_str("model"),
            datetime_utc=get_str("datetime_utc"),
        )
