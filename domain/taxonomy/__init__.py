"""
Taxonomy structure: node types, parsing, and group-name collection.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.groups import collect_group_names
from domain.taxonomy.loader import parse_taxonomy
from domain.taxonomy.nodes import Category, Taxonomy, TaxonomyNode, WordList

__all__ = [
    "Taxonomy",
    "TaxonomyNode",
    "Category",
    "WordList",
    "parse_taxonomy",
    "collect_group_names",
]
