"""Interfaces package for ChunkSift - abstract protocols for external collaborators."""

from .embedding_provider import EmbeddingProvider
from .language_parser import StructuralParser

__all__ = [
    "EmbeddingProvider",
    "StructuralParser",
]
