"""Per-group reduction of classification results."""

from collections.abc import Mapping

from domain.schemas import MatchRecord


def aggregate_by_group(matches: Mapping[str, MatchRecord]) -> dict[str, int]:
    """Sum match counts per group, in order of each group's first appearance."""
    totals: dict[str, int] = {}
    for rec in matches.values():
        totals[rec.group] = totals.get(rec.group, 0) + rec.count
    return totals
