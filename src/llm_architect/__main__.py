"""CLI entry point for llm-architect.

This module provides the command-line interface for starting llm-architect.
It can be invoked as `llm-architect` (via the script entry point) or
`python -m llm_architect`. By default it serves HTTP through uvicorn; with
`--stdio` it serves MCP over stdin/stdout instead.
"""

import argparse
import asyncio
import os
import sys

import uvicorn

from llm_architect import __version__, create_app
from llm_architect.config import ArchitectServerSettings


def main() -> None:
    """Main entry point for the llm-architect CLI.

    Parses command-line arguments and starts either the uvicorn server with
    the FastAPI application or the MCP stdio server.
    """
    parser = argparse.ArgumentParser(
        prog="llm-architect",
        description="Tool server for architectural design feedback via the llm CLI",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"llm-architect {__version__}",
    )

    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Serve MCP over stdin/stdout instead of HTTP",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via ARCHITECT_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via ARCHITECT_PORT)",
    )

    parser.add_argument(
        "--llm-command",
        type=str,
        default=None,
        help="llm executable name or path (default: llm, can be set via ARCHITECT_LLM_COMMAND)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via ARCHITECT_LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.llm_command is not None:
        settings_kwargs["llm_command"] = args.llm_command
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = ArchitectServerSettings(**settings_kwargs)

    if args.stdio:
        from llm_architect.mcp_server import run_stdio

        asyncio.run(run_stdio(settings))
        return

    if args.reload:
        # The reloader imports the app in a fresh process, which only sees
        # settings through the environment
        for key, value in settings_kwargs.items():
            os.environ[f"ARCHITECT_{key.upper()}"] = str(value)

        uvicorn.run(
            "llm_architect.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
