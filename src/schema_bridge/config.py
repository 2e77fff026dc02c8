"""Configuration management for Schema Bridge."""

import json
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format ('json' or 'console')")


class ConversionConfig(BaseModel):
    """Configuration for schema conversion."""

    response_mime_type: str = Field(default="application/json", description="MIME type sent alongside a generated response schema.")
    generated_model_prefix: str = Field(default="GeneratedModel", description="Name prefix for Pydantic models built from response schemas.")


class Config(BaseSettings):
    """Main configuration for Schema Bridge. Loads from environment variables prefixed with SCHEMA_BRIDGE_."""

    model_config = SettingsConfigDict(
        env_prefix='SCHEMA_BRIDGE_',
        env_nested_delimiter='__', # e.g., SCHEMA_BRIDGE_LOGGING__LEVEL
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    app_name: str = Field(default="schema-bridge", description="Name reported in logs.")
    app_version: str = Field(default="0.1.0", description="Version of the Schema Bridge software.")

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Environment variables are not layered on top.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
