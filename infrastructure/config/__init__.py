"""
Configuration management: models and loading.

Handles:
- Settings: taxonomy location, default depth, logging levels
- YAML loading with environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_settings
from infrastructure.config.models import Settings

__all__ = [
    "Settings",
    "load_settings",
]
