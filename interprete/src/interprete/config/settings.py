"""
Configuration management for Interprete.

Hybrid configuration system using YAML files and environment variables.
Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Interprete configuration schema.

    Loads configuration from:
    1. Environment variables (highest priority)
    2. YAML configuration files
    3. Pydantic defaults (lowest priority)

    Configuration files:
        - config/default.yaml: Base defaults
        - config/production.yaml: Production overrides
        - config/development.yaml: Development overrides
        - config/test.yaml: Test overrides
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Interprete"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="production", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the HTTP API",
    )

    # Connection settings
    heartbeat_interval: int = Field(default=30, ge=5, le=300)
    enforce_sender_identity: bool = Field(
        default=False,
        description="Reject private messages whose senderId differs from "
        "the identity the connection authenticated as",
    )

    # Translation providers (OpenRouter preferred over OpenAI)
    openrouter_api_key: Optional[str] = Field(default=None)
    openai_api_key: Optional[str] = Field(default=None)
    openrouter_api_url: str = Field(
        default="https://openrouter.ai/api/v1/chat/completions"
    )
    openai_api_url: str = Field(
        default="https://api.openai.com/v1/chat/completions"
    )
    openrouter_model: str = Field(default="openai/gpt-3.5-turbo")
    openai_model: str = Field(default="gpt-3.5-turbo")
    openrouter_http_referer: str = Field(default="http://localhost:3000")
    openrouter_app_title: str = Field(default="Multilingual Chat App")
    translation_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    translation_max_tokens: int = Field(default=500, ge=1)
    translation_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds before a completion request is abandoned",
    )

    # Graceful Shutdown
    shutdown_timeout: int = Field(
        default=30,
        ge=1,
        description="Maximum seconds to wait for graceful shutdown",
    )
    shutdown_grace_period: int = Field(
        default=5,
        ge=0,
        description="Seconds to wait for WebSocket clients to close",
    )

    # Message Validation
    max_message_size: int = Field(
        default=1_048_576,
        ge=1024,
        description="Maximum WebSocket frame size in bytes",
    )
    max_string_length: int = Field(
        default=1_048_576,
        ge=100,
        description="Maximum string field length in frames",
    )
    max_array_size: int = Field(
        default=1_000,
        ge=10,
        description="Maximum array field size in frames",
    )

    # Logging
    log_level: str = Field(default="info")
    log_file: Optional[str] = Field(default=None)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @property
    def translation_provider(self) -> Optional[str]:
        """Name of the active completion provider, or None."""
        if self.openrouter_api_key:
            return "openrouter"
        if self.openai_api_key:
            return "openai"
        return None


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _set_in_environment(key: str) -> bool:
    return key in os.environ or key.upper() in os.environ


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override

    Returns:
        Settings instance

    Raises:
        ValidationError: If a value fails validation
    """
    # interprete/ (4 levels up from this file)
    project_root = Path(__file__).resolve().parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }
    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    env_file = env_file or default_env_file
    config_file = config_file or default_config_file

    # Load .env file FIRST so its values count as environment variables
    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    merged_config = _read_yaml(config_dir / "default.yaml")
    merged_config.update(_read_yaml(config_dir / config_file))
    merged_config.setdefault("ENV", environment)

    # Init kwargs beat the environment in pydantic-settings, so hand over
    # only the YAML keys the environment does not already provide.
    yaml_values = {
        key: value
        for key, value in merged_config.items()
        if not _set_in_environment(key)
    }
    return Settings(**yaml_values)


# Global settings singleton (lazy initialization)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
