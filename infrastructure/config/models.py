"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, StrictInt, field_validator

from infrastructure.constants import TAXONOMY_FILE

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """
    Runtime configuration.
    - Loaded from configs/settings.yaml (all keys optional)
    - TAXONOMY_FILE environment variable overrides taxonomy_file
    - CLI flags override both
    """

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="JSON or YAML file holding the taxonomy.",
    )
    default_depth: StrictInt | None = Field(
        default=None,
        description="Depth used when --depth is not given on the command line.",
    )

    # Logging
    console_level: str = Field(default="WARNING", description="Console log level.")
    file_level: str = Field(default="DEBUG", description="File log level.")
    log_file: Path | None = Field(default=None, description="Optional rotating log file.")

    @field_validator("console_level", "file_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level {value!r}; expected one of {list(_LEVEL_NAMES)}")
        return level

    @field_validator("default_depth")
    @classmethod
    def _validate_default_depth(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            raise ValueError("default_depth must be a positive integer")
        return value

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)
