"""
Pydantic settings for valuegraph.

Uses pydantic-settings for environment variable validation and type coercion.
Every field can be set through a ``VALUEGRAPH_`` prefixed environment
variable or a ``.env`` file; CLI options take precedence over both.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ValueGraphSettings"]


class ValueGraphSettings(BaseSettings):
    """
    Settings for the visualization pipeline.

    Usage:
        settings = ValueGraphSettings()
        print(settings.placeholder)

        settings = ValueGraphSettings(open_browser=False)
    """

    model_config = SettingsConfigDict(
        env_prefix="VALUEGRAPH_", env_file=".env", extra="ignore"
    )

    # Rendering
    template_path: str | None = Field(
        default=None, description="HTML template (packaged template when unset)"
    )
    placeholder: str = Field(
        default="REPLACE_ME", min_length=1, description="Token replaced by graph JSON"
    )

    # Output
    output_dir: str | None = Field(
        default=None, description="Directory for generated files (system temp when unset)"
    )
    open_browser: bool = True

    # Graph
    preserve_order: bool = Field(
        default=False, description="Number nodes in document order instead of sorted"
    )

    # Logging
    log_level: str = "WARNING"
    log_dir: str | None = Field(
        default=None, description="Directory for JSONL run logs (disabled when unset)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level
