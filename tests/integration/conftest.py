"""Pytest configuration for integration tests.

This module provides integration-test-specific fixtures that replace the
llm CLI with an in-memory fake for API endpoint tests.
"""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def mock_llm_runner(fake_runner):
    """Patch LLMCommandRunner for all integration tests.

    This fixture patches the LLMCommandRunner class before the app starts,
    ensuring the lifespan wires our fake into the tool registry instead of
    a runner that spawns real processes.
    """
    with patch("llm_architect.app.LLMCommandRunner") as mock_runner_class:
        mock_runner_class.return_value = fake_runner
        yield fake_runner
