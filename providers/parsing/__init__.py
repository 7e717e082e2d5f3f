"""Parsing providers package for ChunkSift - tree-sitter parser and query definitions."""

from .queries import GRAMMAR_QUERIES
from .tree_sitter_parser import TOP_LEVEL_KINDS, TreeSitterParser

__all__ = [
    "TreeSitterParser",
    "TOP_LEVEL_KINDS",
    "GRAMMAR_QUERIES",
]
