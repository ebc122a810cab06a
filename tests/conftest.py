"""Pytest configuration and shared fixtures for llm-architect tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup, and a fake llm CLI.
"""

import json
from typing import Sequence

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from llm_architect import create_app
from llm_architect.config import ArchitectServerSettings
from llm_architect.errors import ExecutionError


class FakeLLMRunner:
    """In-memory stand-in for the llm CLI.

    Keeps conversations keyed by id, the way the real CLI does in its log
    database, and answers `prompt` and `logs --current --json` calls.

    Attributes:
        calls: Every (args, stdin_input) pair passed to execute()
        conversations: Conversation id -> list of (prompt, response) turns
        logs_output: When set, returned verbatim for `logs` calls
    """

    def __init__(self, available: bool = True) -> None:
        self.command = "llm"
        self.available = available
        self.calls: list[tuple[list[str], str | None]] = []
        self.conversations: dict[str, list[tuple[str, str]]] = {}
        self.current_id: str | None = None
        self.logs_output: str | None = None

    def is_available(self) -> bool:
        return self.available

    async def execute(
        self, args: Sequence[str], stdin_input: str | None = None
    ) -> str:
        args = list(args)
        self.calls.append((args, stdin_input))

        if args[0] == "prompt":
            if "--conversation" in args:
                conversation_id = args[args.index("--conversation") + 1]
                if conversation_id not in self.conversations:
                    raise ExecutionError(
                        "Failed to execute LLM command: exited with status 1: "
                        f"Error: No conversation found with id={conversation_id}"
                    )
            else:
                conversation_id = f"01conv{len(self.conversations):04d}"
                self.conversations[conversation_id] = []

            response = f"Response to: {stdin_input}"
            self.conversations[conversation_id].append((stdin_input or "", response))
            self.current_id = conversation_id
            return response

        if args[0] == "logs":
            if self.logs_output is not None:
                return self.logs_output
            turns = self.conversations.get(self.current_id or "", [])
            return json.dumps(
                [
                    {
                        "id": f"{self.current_id}-{index}",
                        "conversation_id": self.current_id,
                        "prompt": prompt,
                        "response": response,
                        "model": "gpt-4o-mini",
                    }
                    for index, (prompt, response) in enumerate(turns)
                ]
            )

        raise ExecutionError(f"Failed to execute LLM command: unknown args {args}")

    @property
    def prompt_calls(self) -> list[tuple[list[str], str | None]]:
        return [call for call in self.calls if call[0][0] == "prompt"]


@pytest.fixture
def fake_runner():
    """Create a fake llm runner with the command available."""
    return FakeLLMRunner()


@pytest.fixture
def test_settings():
    """Create test settings.

    Returns:
        ArchitectServerSettings: Settings instance configured for testing.
    """
    return ArchitectServerSettings(
        host="127.0.0.1",
        port=8000,
        llm_command="llm",
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
