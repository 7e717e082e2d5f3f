"""ChunkSift Core Types - Common type definitions and aliases.

This module contains type definitions and type aliases used throughout
the ChunkSift system. These types provide better code clarity, IDE support,
and runtime type checking capabilities.
"""

from typing import List, NewType, Sequence, Tuple


# Content-addressed identifiers (raw 32-byte SHA-256 digests)
DocumentId = NewType("DocumentId", bytes)   # Hash(relative path ∥ full text)
ChunkId = NewType("ChunkId", bytes)         # Hash(document id ∥ chunk text)

# String-based type aliases for better semantic clarity
FilePath = NewType("FilePath", str)         # Root-relative POSIX path
GrammarName = NewType("GrammarName", str)   # e.g., "rust", "python"

# Numeric type aliases
ByteCount = NewType("ByteCount", int)       # Length of a span in bytes
Score = NewType("Score", float)             # Cosine similarity score
Dimensions = NewType("Dimensions", int)     # Embedding vector dimensions

# Complex types
EmbeddingVector = Sequence[float]           # Vector embedding representation
SearchHit = Tuple[int, Score]               # (chunk index, similarity)
EmbeddingMatrix = List[EmbeddingVector]


class ChunkType:
    """Sentinel chunk types produced outside of grammar queries.

    Structured chunks carry the grammar's node kind (e.g. ``function_item``)
    as their type; only the paragraph splitter and the whole-document
    fallback use these fixed labels.
    """

    PARAGRAPH = "paragraph"
    DOCUMENT = "document"

    @classmethod
    def is_sentinel(cls, value: str) -> bool:
        """Return True if ``value`` is one of the non-grammar chunk types."""
        return value in (cls.PARAGRAPH, cls.DOCUMENT)
