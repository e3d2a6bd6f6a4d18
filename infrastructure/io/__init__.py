"""I/O utilities: filesystem operations and taxonomy loading."""

from infrastructure.io.fs import ensure_exists
from infrastructure.io.taxonomy import load_taxonomy

__all__ = [
    "ensure_exists",
    "load_taxonomy",
]
