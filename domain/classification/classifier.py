"""
Depth-bounded classification of phrase tokens against a taxonomy.

The taxonomy is walked level by level with an explicit queue of frames
(node, depth, enclosing_group). Only frames at the target depth are matched:

- a WordList matches its words, attributed to the enclosing top-level group;
- a Category matches its own keys (attributed to the enclosing group) and the
  words of its direct WordList children (attributed to that child's key).

Category names are never counted as word-list matches.
"""

import logging
from collections import deque
from collections.abc import Sequence

from domain.errors import InvalidDepthError
from domain.schemas import MatchRecord
from domain.taxonomy.groups import collect_group_names
from domain.taxonomy.nodes import Category, Taxonomy, TaxonomyNode, WordList

logger = logging.getLogger(__name__)

MAX_SUPPORTED_DEPTH = 4


def validate_depth(depth: object) -> int:
    """Return depth unchanged if it is a positive int, else raise InvalidDepthError."""
    if isinstance(depth, bool) or not isinstance(depth, int) or depth <= 0:
        raise InvalidDepthError(depth)
    return depth


def _record(matches: dict[str, MatchRecord], token: str, group: str) -> None:
    rec = matches.get(token)
    if rec is None:
        # group is fixed by the first match in traversal order
        matches[token] = MatchRecord(count=1, group=group)
    else:
        rec.count += 1


def _match_word_list(
    words: WordList,
    tokens: Sequence[str],
    group: str,
    group_names: set[str],
    matches: dict[str, MatchRecord],
) -> None:
    for token in tokens:
        if token not in group_names and token in words:
            _record(matches, token, group)


def _match_category(
    node: Category,
    tokens: Sequence[str],
    group: str,
    group_names: set[str],
    matches: dict[str, MatchRecord],
) -> None:
    # Category labels at the target level count as matches of their own
    for token in tokens:
        if token in node.key_lookup:
            _record(matches, token, group)

    for key, child in node.children.items():
        if isinstance(child, WordList):
            _match_word_list(child, tokens, key, group_names, matches)


def classify(tokens: Sequence[str], target_depth: int, taxonomy: Taxonomy) -> dict[str, MatchRecord]:
    """
    Find phrase tokens present in the taxonomy at ``target_depth``.

    Args:
        tokens: Normalized phrase tokens (see normalize_phrase)
        target_depth: Level to match at; 1 is the root's keys
        taxonomy: Parsed taxonomy

    Returns:
        word -> MatchRecord, in first-match order. Empty when target_depth
        exceeds MAX_SUPPORTED_DEPTH.

    Raises:
        InvalidDepthError: If target_depth is not a positive integer
    """
    validate_depth(target_depth)
    if target_depth > MAX_SUPPORTED_DEPTH:
        logger.debug("Depth %d exceeds maximum %d; nothing to match", target_depth, MAX_SUPPORTED_DEPTH)
        return {}

    group_names = collect_group_names(taxonomy.root)
    matches: dict[str, MatchRecord] = {}

    # FIFO keeps siblings in key order, so the first visited branch fixes a word's group
    queue: deque[tuple[TaxonomyNode, int, str]] = deque([(taxonomy.root, 1, "")])
    while queue:
        node, depth, group = queue.popleft()

        if depth == target_depth:
            if isinstance(node, WordList):
                _match_word_list(node, tokens, group, group_names, matches)
            else:
                _match_category(node, tokens, group, group_names, matches)
            continue

        if not isinstance(node, Category):
            continue
        for key, child in node.children.items():
            if child is None:
                continue
            queue.append((child, depth + 1, key if depth == 1 else group))

    logger.debug(
        "Classified %d token(s) at depth %d: %d distinct match(es)",
        len(tokens),
        target_depth,
        len(matches),
    )
    return matches
