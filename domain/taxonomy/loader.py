"""Parse taxonomy data from a pre-loaded JSON/YAML value."""

from typing import Any

from domain.taxonomy.nodes import Category, Taxonomy, WordList


def _parse_word_list(items: list[Any], path: str) -> WordList:
    for pos, item in enumerate(items):
        if not isinstance(item, str):
            raise ValueError(f"Word list '{path}' item {pos} must be a string, got {type(item).__name__}")
    return WordList(words=tuple(items))


def _parse_category(data: dict[Any, Any], path: str) -> Category:
    children: dict[str, Category | WordList | None] = {}
    for raw_key, value in data.items():
        key = str(raw_key)
        child_path = f"{path}/{key}" if path else key
        if isinstance(value, dict):
            children[key] = _parse_category(value, child_path)
        elif isinstance(value, list):
            children[key] = _parse_word_list(value, child_path)
        else:
            # scalar or null: the key stays a category name, the branch is empty
            children[key] = None
    return Category(children=children)


def parse_taxonomy(data: Any, source: str | None = None) -> Taxonomy:
    """
    Parse pre-loaded taxonomy data into a Taxonomy.

    This is a pure function - it does NOT perform file I/O.
    Reading the file happens in infrastructure.io.taxonomy.

    Args:
        data: Value from json.load() or yaml.safe_load()
        source: Where the data came from (for error messages and logging)

    Returns:
        Taxonomy whose nodes are tagged as Category or WordList

    Raises:
        ValueError: If the root is not a mapping or a word list holds non-strings
    """
    if not isinstance(data, dict):
        raise ValueError(f"Taxonomy root must be a mapping, got {type(data).__name__}")
    return Taxonomy(root=_parse_category(data, ""), source=source)
