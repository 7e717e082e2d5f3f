"""ChunkSift Core Exceptions Package - Core exception classes for error handling.

This package contains the exception hierarchy for the ChunkSift system.

The exception hierarchy is designed to:
- Separate per-file and per-document failures, which are absorbed and logged,
  from contract violations, which are raised to the caller
- Support structured error messages and context
"""

from .core import (
    ChunkSiftError,
    CollectionError,
    ConfigurationError,
    DimensionMismatchError,
    EmbeddingError,
    IndexingError,
    InvalidIndexError,
    ParsingError,
    QueryCompileError,
    RootNotFoundError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ChunkSiftError",

    # Domain-specific exceptions
    "ValidationError",
    "CollectionError",
    "RootNotFoundError",
    "ParsingError",
    "QueryCompileError",
    "IndexingError",
    "DimensionMismatchError",
    "InvalidIndexError",
    "EmbeddingError",
    "ConfigurationError",
]
