"""ChunkSift Core Types Package - Common type definitions and aliases.

This package contains type definitions and type aliases used throughout
the ChunkSift system.

The types are organized into logical groups:
- Content-addressed identifiers
- Chunk type sentinels
- Common aliases for better readability
"""

from .common import (
    ByteCount,
    ChunkId,
    ChunkType,
    Dimensions,
    DocumentId,
    EmbeddingMatrix,
    EmbeddingVector,
    FilePath,
    GrammarName,
    Score,
    SearchHit,
)

__all__ = [
    # Sentinels
    "ChunkType",

    # Identifiers
    "DocumentId",
    "ChunkId",

    # String types
    "FilePath",
    "GrammarName",

    # Numeric types
    "ByteCount",
    "Score",
    "Dimensions",

    # Complex types
    "EmbeddingVector",
    "EmbeddingMatrix",
    "SearchHit",
]
