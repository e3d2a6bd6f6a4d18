"""Taxonomy node types: a tagged union of Category and WordList."""

from functools import cached_property

from pydantic import BaseModel, Field


class WordList(BaseModel):
    """Terminal node: an ordered sequence of literal words."""

    words: tuple[str, ...] = Field(default_factory=tuple)

    @cached_property
    def lookup(self) -> frozenset[str]:
        """Lower-cased words for case-insensitive membership."""
        return frozenset(w.lower() for w in self.words)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.lower() in self.lookup


class Category(BaseModel):
    """
    Internal node: category name -> child node.

    A child of None marks a key whose source value was neither a mapping nor a
    list. The key is still a category name but the branch is a dead end.
    """

    children: dict[str, "Category | WordList | None"] = Field(default_factory=dict)

    @cached_property
    def key_lookup(self) -> frozenset[str]:
        """Lower-cased keys of this node."""
        return frozenset(k.lower() for k in self.children)


Category.model_rebuild()

TaxonomyNode = Category | WordList


class Taxonomy(BaseModel):
    """Parsed taxonomy tree; depth 1 is the root's keys."""

    root: Category = Field(default_factory=Category)
    source: str | None = None

    @property
    def depth(self) -> int:
        """Deepest level holding a key or a word list (0 for an empty taxonomy)."""
        deepest = 0
        stack: list[tuple[TaxonomyNode | None, int]] = [(self.root, 1)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, Category) and node.children:
                deepest = max(deepest, level)
                stack.extend((child, level + 1) for child in node.children.values())
            elif isinstance(node, WordList):
                deepest = max(deepest, level)
        return deepest
