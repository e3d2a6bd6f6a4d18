"""Classification workflow: load, normalize, classify, aggregate."""

import logging
import time
from pathlib import Path

from domain.classification import aggregate_by_group, classify, normalize_phrase, validate_depth
from domain.schemas import ClassificationResult
from domain.taxonomy import Taxonomy
from infrastructure.io import load_taxonomy

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def classify_phrase(phrase: str, depth: int, taxonomy: Taxonomy) -> ClassificationResult:
    """
    Classify one phrase against an already-loaded taxonomy.

    Args:
        phrase: Raw phrase text
        depth: Target depth (positive integer)
        taxonomy: Parsed taxonomy

    Returns:
        ClassificationResult with matches, group totals and classify_ms

    Raises:
        InvalidDepthError: If depth is not a positive integer
    """
    validate_depth(depth)

    start = time.perf_counter()
    tokens = normalize_phrase(phrase)
    matches = classify(tokens, depth, taxonomy)
    totals = aggregate_by_group(matches)
    classify_ms = _elapsed_ms(start)

    logger.info(
        "Matched %d distinct word(s) in %d group(s) from %d token(s)",
        len(matches),
        len(totals),
        len(tokens),
    )
    return ClassificationResult(
        phrase=phrase,
        depth=depth,
        tokens=tokens,
        matches=matches,
        group_totals=totals,
        classify_ms=classify_ms,
    )


def run_classification(phrase: str, depth: int, taxonomy_path: Path) -> ClassificationResult:
    """
    Load the taxonomy from disk and classify ``phrase`` at ``depth``.

    The depth is checked before any I/O so an invalid request never touches
    the taxonomy file.

    Raises:
        InvalidDepthError: If depth is not a positive integer
        DataSourceError: If the taxonomy cannot be loaded
    """
    validate_depth(depth)

    logger.info("Loading taxonomy from %s...", taxonomy_path)
    start = time.perf_counter()
    taxonomy = load_taxonomy(taxonomy_path)
    load_ms = _elapsed_ms(start)
    logger.info("Taxonomy loaded: %d top-level groups, depth %d", len(taxonomy.root.children), taxonomy.depth)

    result = classify_phrase(phrase, depth, taxonomy)
    result.load_ms = load_ms
    return result
