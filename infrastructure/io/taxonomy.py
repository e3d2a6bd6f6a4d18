"""Taxonomy file loading."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from domain.errors import DataSourceError
from domain.taxonomy import Taxonomy, parse_taxonomy
from infrastructure.constants import JSON_SUFFIXES, YAML_SUFFIXES

logger = logging.getLogger(__name__)


def _read_structured(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as f:
        if suffix in JSON_SUFFIXES:
            return json.load(f)
        return yaml.safe_load(f)


def load_taxonomy(path: Path) -> Taxonomy:
    """
    Load a taxonomy from a JSON or YAML file.

    This function handles file I/O, then delegates parsing to the domain layer.

    Supported formats:
    - JSON: .json
    - YAML: .yaml, .yml

    Args:
        path: Path to the taxonomy file

    Returns:
        Parsed Taxonomy

    Raises:
        DataSourceError: If the file is missing, unreadable, in an unsupported
            format, not valid JSON/YAML, or not a valid taxonomy
    """
    source = str(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise DataSourceError(
            f"Unsupported taxonomy format: {suffix or '<none>'}. Supported formats: .json, .yaml, .yml",
            source=source,
        )
    if not path.is_file():
        raise DataSourceError(f"Taxonomy file not found: {path}", source=source)

    try:
        data = _read_structured(path)
    except OSError as e:
        raise DataSourceError(f"Cannot read taxonomy file {path}: {e}", source=source) from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DataSourceError(f"Taxonomy file {path} is not valid structured data: {e}", source=source) from e

    try:
        taxonomy = parse_taxonomy(data, source=source)
    except ValueError as e:
        raise DataSourceError(f"Invalid taxonomy in {path}: {e}", source=source) from e

    logger.debug(
        "Loaded taxonomy from %s (%d top-level groups, depth %d)",
        path,
        len(taxonomy.root.children),
        taxonomy.depth,
    )
    return taxonomy
