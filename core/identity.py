"""Content addressing for documents and chunks.

Both identifiers come from the same primitive, a SHA-256 digest over a
context prefix followed by the content bytes:

    DocumentId = H(relative_path ∥ full_text)
    ChunkId    = H(document_id ∥ chunk_text)

Identity depends only on observable content, so two runs over identical
inputs give identical IDs regardless of scheduling.
"""

import hashlib

from .types import ChunkId, DocumentId

DIGEST_SIZE = 32


def content_hash(context: bytes, content: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``context`` followed by ``content``."""
    digest = hashlib.sha256()
    digest.update(context)
    digest.update(content)
    return digest.digest()


def compute_document_id(path: str, text: str) -> DocumentId:
    """Identity of a document from its root-relative path and full text."""
    return DocumentId(content_hash(path.encode("utf-8"), text.encode("utf-8")))


def compute_chunk_id(doc_id: DocumentId, chunk_text: str) -> ChunkId:
    """Identity of a chunk from its owning document and its (trimmed) text."""
    return ChunkId(content_hash(bytes(doc_id), chunk_text.encode("utf-8")))


def short_id(value: bytes, length: int = 12) -> str:
    """Hex prefix of an identifier, for log lines."""
    return value.hex()[:length]
