"""
Phrase classification: normalization, depth-bounded matching, and aggregation.

All functions are pure; each call builds its own group-name set and results.
"""

from domain.classification.aggregation import aggregate_by_group
from domain.classification.classifier import MAX_SUPPORTED_DEPTH, classify, validate_depth
from domain.classification.normalizer import PUNCTUATION, normalize_phrase

__all__ = [
    "classify",
    "validate_depth",
    "MAX_SUPPORTED_DEPTH",
    "normalize_phrase",
    "PUNCTUATION",
    "aggregate_by_group",
]
