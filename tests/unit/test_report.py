import json

from application import render_json_report, render_text_report
from domain.schemas import ClassificationResult, MatchRecord


def _result(matches: dict[str, MatchRecord], totals: dict[str, int]) -> ClassificationResult:
    return ClassificationResult(
        phrase="I love tiger and lion",
        depth=3,
        tokens=["i", "love", "tiger", "and", "lion"],
        matches=matches,
        group_totals=totals,
    )


def test_text_report_lists_words_then_groups() -> None:
    result = _result(
        {
            "tiger": MatchRecord(count=2, group="animals"),
            "lion": MatchRecord(count=1, group="animals"),
            "oak": MatchRecord(count=1, group="plants"),
        },
        {"animals": 3, "plants": 1},
    )
    assert render_text_report(result) == [
        "tiger = 2; lion = 1; oak = 1",
        "animals = 3; plants = 1",
    ]


def test_text_report_without_matches_is_zero() -> None:
    assert render_text_report(_result({}, {})) == ["0"]


def test_json_report_contains_full_result() -> None:
    result = _result({"tiger": MatchRecord(count=1, group="animals")}, {"animals": 1})
    payload = json.loads(render_json_report(result))
    assert payload["depth"] == 3
    assert payload["matches"] == {"tiger": {"count": 1, "group": "animals"}}
    assert payload["group_totals"] == {"animals": 1}


def test_root_level_matches_render_with_empty_group_label() -> None:
    result = ClassificationResult(
        phrase="animals animals plants",
        depth=1,
        tokens=["animals", "animals", "plants"],
        matches={"animals": MatchRecord(count=2, group=""), "plants": MatchRecord(count=1, group="")},
        group_totals={"": 3},
    )
    assert render_text_report(result) == ["animals = 2; plants = 1", " = 3"]
