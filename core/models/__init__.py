"""ChunkSift Core Models Package - Domain model definitions.

This package contains the core domain models that represent the fundamental
entities in the ChunkSift system: collected documents and the chunks cut
from them.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Identity derived purely from content, never from counters or clocks
- Clear separation between domain logic and infrastructure concerns
"""

from .document import Document, extension_of, normalize_path
from .chunk import Chunk

__all__ = [
    "Document",
    "Chunk",
    "extension_of",
    "normalize_path",
]
