"""
Config component input/output models.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OutputFormat = Literal["text", "json"]


class ValidatorConfig(BaseModel):
    """Settings for the command-line surface. Validation itself has no knobs."""

    model_config = ConfigDict(extra="forbid")

    fail_on_warnings: bool = False
    output_format: OutputFormat = "text"
    analyze: bool = True
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""

    def __init__(self, path: Path, errors: list[str]) -> None:
        self.path = path
        self.errors = errors
        super().__init__(f"Invalid config {path}: {'; '.join(errors)}")


@dataclass(frozen=True)
class LoadConfigInput:
    """Input for loading configuration."""

    config_path: Path | str | None = None


@dataclass(frozen=True)
class LoadConfigOutput:
    """Output from loading configuration."""

    config: ValidatorConfig
    source: Path | None = None
    errors: list[str] = field(default_factory=list)
    success: bool = True
