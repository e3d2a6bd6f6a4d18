import json
from pathlib import Path

import pytest

from application import classify_phrase, run_classification
from domain.errors import DataSourceError, InvalidDepthError
from domain.taxonomy import parse_taxonomy


def _write_taxonomy(tmp_path: Path) -> Path:
    path = tmp_path / "hierarchy.json"
    path.write_text(
        json.dumps({"animals": {"wild": ["tiger", "lion"]}, "plants": {"trees": ["oak"]}}),
        encoding="utf-8",
    )
    return path


def test_run_classification_end_to_end(tmp_path: Path) -> None:
    result = run_classification("Tiger, tiger and oak!", 3, _write_taxonomy(tmp_path))

    assert result.tokens == ["tiger", "tiger", "and", "oak"]
    assert {w: r.count for w, r in result.matches.items()} == {"tiger": 2, "oak": 1}
    assert result.group_totals == {"animals": 2, "plants": 1}
    assert result.load_ms >= 0.0
    assert result.classify_ms >= 0.0


def test_invalid_depth_is_rejected_before_loading(tmp_path: Path) -> None:
    with pytest.raises(InvalidDepthError):
        run_classification("tiger", 0, tmp_path / "does-not-exist.json")


def test_missing_taxonomy_surfaces_data_source_error(tmp_path: Path) -> None:
    with pytest.raises(DataSourceError):
        run_classification("tiger", 2, tmp_path / "does-not-exist.json")


def test_classify_phrase_beyond_maximum_depth() -> None:
    taxonomy = parse_taxonomy({"animals": {"wild": ["tiger"]}})
    result = classify_phrase("tiger", 5, taxonomy)
    assert result.matches == {}
    assert result.group_totals == {}
    assert not result.has_matches
