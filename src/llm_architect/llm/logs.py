"""Conversation id discovery from the llm CLI logs."""

import json
import logging

from llm_architect.errors import ConversationStateError, LogParseError
from llm_architect.llm.client import CommandRunner
from llm_architect.llm.types import LogEntry

logger = logging.getLogger(__name__)

LOGS_ARGS = ["logs", "--current", "--json"]


class ConversationResolver:
    """Learns the conversation id the llm CLI assigned to a new prompt.

    `llm prompt` without `--conversation` starts a conversation but does not
    print its id. Right after such a call, `llm logs --current --json` lists
    the entries of that (now current) conversation, and the first entry's
    `conversation_id` is the id to hand back to the caller.

    This depends on the CLI treating the conversation it just wrote as the
    current one. If two new conversations are started concurrently the
    result is undefined.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    async def latest_conversation_id(self) -> str:
        """Return the id of the llm CLI's current conversation.

        Raises:
            ExecutionError: If the logs command fails
            LogParseError: If the output is not a JSON list
            ConversationStateError: If the list is empty or has no id
        """
        logger.debug("Getting latest conversation ID")
        output = await self.runner.execute(LOGS_ARGS)

        try:
            logs = json.loads(output)
        except json.JSONDecodeError as e:
            raise LogParseError("Failed to parse logs JSON") from e

        if not isinstance(logs, list):
            raise LogParseError(
                f"Failed to parse logs JSON: expected a list, got {type(logs).__name__}"
            )

        if not logs or not isinstance(logs[0], dict):
            raise ConversationStateError("No valid conversation ID found in logs")

        entry = LogEntry.from_log_entry(logs[0])
        if not entry.conversation_id:
            raise ConversationStateError("No valid conversation ID found in logs")

        logger.debug(f"Found conversation ID: {entry.conversation_id}")
        return entry.conversation_id
