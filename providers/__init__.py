"""Providers package for ChunkSift - concrete implementations of abstract interfaces."""

from .parsing import TreeSitterParser

__all__ = [
    # Parsing providers
    "TreeSitterParser",
]
