"""Configuration loading from YAML files and the environment."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import Settings
from infrastructure.constants import TAXONOMY_FILE_ENV

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # an empty file is an empty config
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_settings(path: Path | None = None, *, required: bool = False) -> Settings:
    """
    Load settings.yaml into a Settings object.

    Args:
        path: Path to the YAML file; None means defaults only
        required: If False, a missing file falls back to defaults

    Returns:
        Settings with the TAXONOMY_FILE environment override applied

    Raises:
        FileNotFoundError: If required=True and the file does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    data: dict[str, Any] = {}
    if path is not None:
        if path.exists() or required:
            data = _load_yaml(path)
            logger.debug("Loaded settings from %s", path)
        else:
            logger.debug("No settings file at %s; using defaults", path)

    env_taxonomy = os.environ.get(TAXONOMY_FILE_ENV)
    if env_taxonomy:
        data["taxonomy_file"] = env_taxonomy
        logger.debug("Taxonomy file overridden by %s=%s", TAXONOMY_FILE_ENV, env_taxonomy)

    return Settings(**data)
