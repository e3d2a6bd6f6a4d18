"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML, environment)
- Taxonomy file loading (JSON, YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import Settings, load_settings
from infrastructure.io import load_taxonomy

__all__ = [
    "load_settings",
    "Settings",
    "load_taxonomy",
]
