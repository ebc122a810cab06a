"""The `architect` tool: conversational design feedback via the llm CLI.

The llm CLI keeps conversation history on its own. This tool makes that
history reachable through stateless calls: a call without a conversation id
starts a new conversation and reports the id the CLI assigned, and a call
with an id continues that conversation.
"""

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from llm_architect.errors import (
    ArchitectError,
    DependencyMissingError,
    InvalidInputError,
)
from llm_architect.llm.client import CommandRunner
from llm_architect.llm.logs import ConversationResolver
from llm_architect.tools.base import Tool, ToolMetadata

logger = logging.getLogger(__name__)

ARCHITECT_TOOL_NAME = "architect"
ARCHITECT_DESCRIPTION = (
    'MCP server for the LLM Architect tool. Exposes resource "/llm-architect/chat" '
    "accepting POST requests with a prompt and optional conversationId, and interacts "
    "with the llm chat CLI to provide architectural design feedback while maintaining "
    "conversation context."
)

_NEWLINES = re.compile(r"\r\n|\r|\n")

# Pydantic error types mapped to the wording used in error messages
_ERROR_RULES = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "must not be empty",
}


class ArchitectInput(BaseModel):
    """Arguments accepted by the architect tool."""

    input: str = Field(
        ...,
        min_length=1,
        description="Input prompt to process",
    )
    conversation_id: str | None = Field(
        default=None,
        alias="conversationId",
        description="Optional conversation ID for context",
    )

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    @field_validator("conversation_id")
    @classmethod
    def empty_id_means_new_conversation(cls, value: str | None) -> str | None:
        return value or None


class ArchitectResult(BaseModel):
    """Result of one architect call."""

    conversation_id: str = Field(..., alias="conversationId")
    response: str

    model_config = ConfigDict(populate_by_name=True)


def normalize_prompt(text: str) -> str:
    """Collapse line breaks to single spaces and trim the result.

    The llm CLI receives the prompt as a single line. Applying this twice
    gives the same result as applying it once.
    """
    return _NEWLINES.sub(" ", text).strip()


def validate_arguments(raw: Any) -> ArchitectInput:
    """Validate raw tool arguments.

    Args:
        raw: Argument bag as received from the transport

    Returns:
        ArchitectInput: The validated arguments

    Raises:
        InvalidInputError: If a field is missing, of the wrong type, or empty
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidInputError("arguments must be an object")

    try:
        return ArchitectInput.model_validate(raw)
    except PydanticValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "arguments"
            rule = _ERROR_RULES.get(error["type"], error["msg"])
            problems.append(f"{field} {rule}")
        raise InvalidInputError("; ".join(problems), errors=problems) from e


class ArchitectTool(Tool):
    """Conversation continuity adapter around the llm CLI.

    Attributes:
        runner: Runs the llm command
        resolver: Finds the id of a newly created conversation
    """

    def __init__(
        self,
        runner: CommandRunner,
        resolver: ConversationResolver | None = None,
    ) -> None:
        self.runner = runner
        self.resolver = resolver or ConversationResolver(runner)

    def get_metadata(self) -> ToolMetadata:
        return ToolMetadata(
            name=ARCHITECT_TOOL_NAME,
            description=ARCHITECT_DESCRIPTION,
            input_model=ArchitectInput,
        )

    async def process_input(self, raw: Any) -> str:
        """Send a prompt to the llm CLI and return the serialized result.

        Args:
            raw: Argument bag with `input` and optional `conversationId`

        Returns:
            str: JSON object `{"conversationId": ..., "response": ...}`

        Raises:
            InvalidInputError: If the arguments are invalid (unchanged)
            DependencyMissingError: If the llm command is not on PATH
            ExecutionError: If the llm command fails or returns nothing
            LogParseError: If the logs listing is not a JSON list
            ConversationStateError: If the logs listing has no conversation id
        """
        try:
            if not self.runner.is_available():
                raise DependencyMissingError(
                    "LLM command not found. Please ensure it is installed and in your PATH."
                )

            arguments = validate_arguments(raw)
            prompt = normalize_prompt(arguments.input)
            if not prompt:
                raise InvalidInputError("input must not be empty")

            result = await self._handle_conversation(prompt, arguments.conversation_id)
        except InvalidInputError:
            raise
        except ArchitectError as e:
            raise type(e)(f"Failed to process input: {e}") from e

        return result.model_dump_json(by_alias=True)

    async def _handle_conversation(
        self, prompt: str, conversation_id: str | None
    ) -> ArchitectResult:
        logger.debug(f"Handling conversation: prompt={prompt!r}, id={conversation_id}")

        if conversation_id:
            logger.info(f"Continuing conversation {conversation_id}")
            response = await self.runner.execute(
                ["prompt", "--conversation", conversation_id, "--no-stream"],
                prompt,
            )
            logger.debug(f"Continued conversation response: {response!r}")
            return ArchitectResult(conversation_id=conversation_id, response=response)

        logger.info("Starting new conversation")
        response = await self.runner.execute(["prompt", "--no-stream"], prompt)
        # The prompt already succeeded here; a resolver failure still fails the call
        new_conversation_id = await self.resolver.latest_conversation_id()
        logger.info(f"New conversation created: {new_conversation_id}")
        return ArchitectResult(conversation_id=new_conversation_id, response=response)
