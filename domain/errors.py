"""
Domain-specific exceptions.

The classifier itself raises only InvalidDepthError; DataSourceError is raised
by the loaders at the infrastructure boundary, before classification runs.
"""

from typing import Any


class ClassifierError(Exception):
    """Base exception for taxonomy loading and classification errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class DataSourceError(ClassifierError):
    """The taxonomy resource is missing, unreadable, or not valid structured data."""

    def __init__(self, message: str, source: str | None = None) -> None:
        details = {"source": source} if source else None
        super().__init__(message, details)
        self.source = source


class InvalidDepthError(ClassifierError, ValueError):
    """Depth is not a positive integer."""

    def __init__(self, depth: object) -> None:
        super().__init__(f"Depth must be a positive integer, got {depth!r}", {"depth": depth})
        self.depth = depth
