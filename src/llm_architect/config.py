"""Configuration module for llm-architect using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArchitectServerSettings(BaseSettings):
    """Main configuration settings for llm-architect.

    All settings can be overridden via environment variables with the ARCHITECT_ prefix.
    For example, ARCHITECT_LLM_COMMAND will override the llm_command setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    server_name: str = "llm-architect"

    # External chat engine
    llm_command: str = "llm"

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="ARCHITECT_")
