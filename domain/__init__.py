"""
Domain layer: Business logic with no I/O.

Contains:
- schemas: Pydantic models for match records and results
- taxonomy: Taxonomy node types, parsing, and group-name collection
- classification: Phrase normalization, classification, and aggregation
- errors: Domain exceptions
"""

from domain.errors import ClassifierError, DataSourceError, InvalidDepthError
from domain.schemas import ClassificationResult, MatchRecord

__all__ = [
    "MatchRecord",
    "ClassificationResult",
    "ClassifierError",
    "DataSourceError",
    "InvalidDepthError",
]
