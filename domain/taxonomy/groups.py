"""Group-name collection over a taxonomy tree."""

from domain.taxonomy.nodes import Category, WordList


def collect_group_names(node: Category | WordList | None) -> set[str]:
    """
    Collect every category name (key) found at any depth below ``node``.

    Pre-order traversal of the internal nodes. Word lists hold literal words,
    not subcategories, so they contribute nothing and are not descended into.

    Args:
        node: Any taxonomy node (typically the root)

    Returns:
        Set of lower-cased category names
    """
    names: set[str] = set()
    stack: list[Category | WordList | None] = [node]
    while stack:
        current = stack.pop()
        if not isinstance(current, Category):
            continue
        for key, child in current.children.items():
            names.add(key.lower())
            if isinstance(child, Category):
                stack.append(child)
    return names
