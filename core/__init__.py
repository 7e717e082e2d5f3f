"""ChunkSift Core Package - Domain models, types, identity, and exceptions.

This package contains the core domain models and types that form the foundation
of the ChunkSift architecture. These models are independent of infrastructure
concerns (parsing, threading, vector math).

Modules:
    models: Domain models for Document and Chunk entities
    types: Common type definitions and aliases
    identity: Content-addressing primitive shared by documents and chunks
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ChunkSiftError,
    CollectionError,
    DimensionMismatchError,
    EmbeddingError,
    IndexingError,
    InvalidIndexError,
    ParsingError,
    RootNotFoundError,
    ValidationError,
)
from .identity import compute_chunk_id, compute_document_id, content_hash
from .models import Chunk, Document
from .types import ChunkId, ChunkType, DocumentId

__all__ = [
    # Domain Models
    "Document",
    "Chunk",

    # Types
    "ChunkType",
    "ChunkId",
    "DocumentId",

    # Identity
    "content_hash",
    "compute_document_id",
    "compute_chunk_id",

    # Exceptions
    "ChunkSiftError",
    "ValidationError",
    "CollectionError",
    "RootNotFoundError",
    "ParsingError",
    "IndexingError",
    "DimensionMismatchError",
    "InvalidIndexError",
    "EmbeddingError",
]

__version__ = "0.1.0"
