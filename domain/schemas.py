"""Pydantic models for classification results."""

from pydantic import BaseModel, Field


class MatchRecord(BaseModel):
    """Occurrences of one matched word and the group it is attributed to."""

    count: int = Field(..., ge=1, description="Number of times the word matched.")
    group: str = Field(
        default="",
        description="Category the first match was attributed to; empty for matches at the root level.",
    )


class ClassificationResult(BaseModel):
    """Outcome of classifying one phrase at one depth."""

    phrase: str
    depth: int
    tokens: list[str] = Field(default_factory=list)
    matches: dict[str, MatchRecord] = Field(default_factory=dict)
    group_totals: dict[str, int] = Field(default_factory=dict)
    load_ms: float = 0.0
    classify_ms: float = 0.0

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)
