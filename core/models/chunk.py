"""ChunkSift Chunk Domain Model - Represents a content-addressed text fragment.

This module contains the Chunk domain model which represents a trimmed
fragment of a Document, tagged with the grammar node kind it came from (or
one of the "paragraph" / "document" sentinels). Chunks are immutable and
carry their owning document's ID by value.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..identity import DIGEST_SIZE, compute_chunk_id, short_id
from ..types import ByteCount, ChunkId, ChunkType, DocumentId
from ..exceptions import ValidationError


@dataclass(frozen=True)
class Chunk:
    """Domain model representing a chunk of document text.

    Attributes:
        id: Content address, Hash(doc_id ∥ text)
        doc_id: ID of the Document the chunk was cut from (validated by lookup)
        text: Trimmed chunk text
        chunk_type: Grammar node kind, or "paragraph" / "document"
        char_count: Byte length of the untrimmed source span
    """

    id: ChunkId
    doc_id: DocumentId
    text: str
    chunk_type: str
    char_count: ByteCount

    def __post_init__(self):
        """Validate chunk model after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate chunk model attributes."""
        if len(self.id) != DIGEST_SIZE:
            raise ValidationError("id", self.id, f"Chunk ID must be {DIGEST_SIZE} bytes")

        if len(self.doc_id) != DIGEST_SIZE:
            raise ValidationError("doc_id", self.doc_id, f"Document ID must be {DIGEST_SIZE} bytes")

        if not self.chunk_type:
            raise ValidationError("chunk_type", self.chunk_type, "Chunk type cannot be empty")

        if self.char_count < 0:
            raise ValidationError("char_count", self.char_count, "Character count cannot be negative")

        # The whole-document fallback is the only chunk allowed to be empty
        if not self.text.strip() and self.chunk_type != ChunkType.DOCUMENT:
            raise ValidationError("text", self.text, "Chunk text cannot be empty")

    @classmethod
    def create(cls, doc_id: DocumentId, text: str, chunk_type: str, char_count: int) -> "Chunk":
        """Create a Chunk from already-trimmed text, computing its ID.

        Args:
            doc_id: Owning document ID
            text: Trimmed chunk text
            chunk_type: Node kind or sentinel type
            char_count: Byte length of the untrimmed span

        Returns:
            New Chunk instance
        """
        return cls(
            id=compute_chunk_id(doc_id, text),
            doc_id=doc_id,
            text=text,
            chunk_type=chunk_type,
            char_count=ByteCount(char_count),
        )

    @property
    def hex_id(self) -> str:
        """Full hex rendering of the chunk ID."""
        return self.id.hex()

    @property
    def is_fallback(self) -> bool:
        """Whether this chunk covers the whole document."""
        return self.chunk_type == ChunkType.DOCUMENT

    @property
    def is_structured(self) -> bool:
        """Whether this chunk came from a grammar query."""
        return not ChunkType.is_sentinel(self.chunk_type)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Chunk model to a dictionary with hex IDs."""
        return {
            "id": self.hex_id,
            "doc_id": self.doc_id.hex(),
            "text": self.text,
            "chunk_type": self.chunk_type,
            "char_count": self.char_count,
        }

    def __repr__(self) -> str:
        """Return a compact representation of the chunk."""
        return (
            f"Chunk(id={short_id(self.id)}, doc_id={short_id(self.doc_id)}, "
            f"type={self.chunk_type}, char_count={self.char_count})"
        )
