"""Phrase normalization into match tokens."""

import re

# Characters removed before splitting; apostrophes and quotes are kept.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"
_PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")


def normalize_phrase(raw: object) -> list[str]:
    """
    Turn a raw phrase into an ordered list of lower-cased tokens.

    Examples:
        >>> normalize_phrase("Eu amo tigres, cavalos e gorilas.")
        ['eu', 'amo', 'tigres', 'cavalos', 'e', 'gorilas']
        >>> normalize_phrase("  lion  lion ")
        ['lion', 'lion']

    Duplicates are kept since repetition is counted. Runs of whitespace never
    produce empty tokens.

    Args:
        raw: Raw phrase (None yields no tokens)

    Returns:
        Tokens in phrase order
    """
    if raw is None:
        return []
    text = _PUNCTUATION_RE.sub("", str(raw).lower())
    return text.split()
