"""Rendering of classification results for the console."""

import json
import logging

from application.constants import NO_MATCHES_SENTINEL, PAIR_SEPARATOR
from domain.schemas import ClassificationResult

logger = logging.getLogger(__name__)


def _join_pairs(pairs: dict[str, int]) -> str:
    return PAIR_SEPARATOR.join(f"{name} = {count}" for name, count in pairs.items())


def render_text_report(result: ClassificationResult) -> list[str]:
    """
    Render the result as console lines.

    Returns:
        ["tiger = 2; lion = 1", "animals = 3"], or ["0"] when nothing matched
    """
    if not result.has_matches:
        return [NO_MATCHES_SENTINEL]
    words = {word: rec.count for word, rec in result.matches.items()}
    return [_join_pairs(words), _join_pairs(result.group_totals)]


def render_json_report(result: ClassificationResult) -> str:
    """Render the full result as pretty-printed JSON."""
    return json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2)


def log_timing_summary(result: ClassificationResult) -> None:
    """Log a concise timing summary (shown with --verbose)."""
    logger.info("=== Timing ===")
    logger.info("Taxonomy load: %.3f ms", result.load_ms)
    logger.info("Phrase classification: %.3f ms", result.classify_ms)
