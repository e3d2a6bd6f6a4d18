import pytest

from domain.taxonomy import Category, WordList, parse_taxonomy


def test_nodes_are_tagged_at_parse_time() -> None:
    taxonomy = parse_taxonomy({"animals": {"wild": ["Tiger", "lion"]}, "misc": "n/a"}, source="inline")
    animals = taxonomy.root.children["animals"]
    assert isinstance(animals, Category)
    wild = animals.children["wild"]
    assert isinstance(wild, WordList)
    assert wild.words == ("Tiger", "lion")
    assert "tiger" in wild
    assert "TIGER" in wild
    assert "bear" not in wild
    assert taxonomy.root.children["misc"] is None
    assert taxonomy.source == "inline"


def test_key_order_is_preserved() -> None:
    taxonomy = parse_taxonomy({"z": [], "a": [], "m": []})
    assert list(taxonomy.root.children) == ["z", "a", "m"]


def test_keys_are_stringified() -> None:
    taxonomy = parse_taxonomy({1: ["one"]})
    assert list(taxonomy.root.children) == ["1"]


def test_depth_counts_levels_down_to_word_lists() -> None:
    assert parse_taxonomy({}).depth == 0
    assert parse_taxonomy({"a": None}).depth == 1
    assert parse_taxonomy({"a": ["x"]}).depth == 2
    assert parse_taxonomy({"a": {"b": ["x"]}, "c": []}).depth == 3


@pytest.mark.parametrize("data", [[], ["a"], "text", 3, None])
def test_root_must_be_a_mapping(data: object) -> None:
    with pytest.raises(ValueError, match="root must be a mapping"):
        parse_taxonomy(data)


def test_word_list_items_must_be_strings() -> None:
    with pytest.raises(ValueError, match="animals/wild"):
        parse_taxonomy({"animals": {"wild": ["tiger", 3]}})
