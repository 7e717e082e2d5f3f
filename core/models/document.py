"""ChunkSift Document Domain Model - Represents one collected source file.

A Document is created once per discovered file by the collector and never
mutated afterwards. Its identity is derived from its root-relative path and
full text, so the same file content at the same relative location always
produces the same Document ID.
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional, Dict, Any

from ..identity import DIGEST_SIZE, compute_document_id, short_id
from ..types import ByteCount, DocumentId, FilePath
from ..exceptions import ValidationError


def normalize_path(path: "str | PurePath") -> FilePath:
    """Normalize a relative path to forward-slash separators.

    Args:
        path: Relative path as a string or PurePath

    Returns:
        Platform-independent path string
    """
    if isinstance(path, PurePath):
        return FilePath(path.as_posix())
    return FilePath(path.replace("\\", "/"))


def extension_of(path: str) -> str:
    """Lowercase extension of ``path`` without the leading dot ("" if none)."""
    suffix = PurePath(path).suffix
    return suffix[1:].lower() if suffix else ""


@dataclass(frozen=True)
class Document:
    """Domain model representing a collected text file.

    Attributes:
        id: Content address, Hash(path ∥ text)
        path: Root-relative path with "/" separators
        text: Full UTF-8 text of the file
        ext: Lowercase extension without the leading dot
        size: Byte length of the raw file
    """

    id: DocumentId
    path: FilePath
    text: str
    ext: str
    size: ByteCount

    def __post_init__(self):
        """Validate document model after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate document model attributes."""
        if not self.path:
            raise ValidationError("path", self.path, "Path cannot be empty")

        if len(self.id) != DIGEST_SIZE:
            raise ValidationError("id", self.id, f"Document ID must be {DIGEST_SIZE} bytes")

        if self.size < 0:
            raise ValidationError("size", self.size, "Size cannot be negative")

    @classmethod
    def from_text(cls, path: "str | PurePath", text: str, size: Optional[int] = None) -> "Document":
        """Create a Document with its content-addressed ID.

        Args:
            path: Root-relative path (normalized to "/" separators)
            text: Full text of the file
            size: Raw byte size; defaults to the UTF-8 length of ``text``

        Returns:
            New Document instance
        """
        rel_path = normalize_path(path)
        return cls(
            id=compute_document_id(rel_path, text),
            path=rel_path,
            text=text,
            ext=extension_of(rel_path),
            size=ByteCount(len(text.encode("utf-8")) if size is None else size),
        )

    @property
    def hex_id(self) -> str:
        """Full hex rendering of the document ID."""
        return self.id.hex()

    def to_dict(self) -> Dict[str, Any]:
        """Convert Document model to a dictionary with a hex ID."""
        return {
            "id": self.hex_id,
            "path": self.path,
            "text": self.text,
            "ext": self.ext,
            "size": self.size,
        }

    def __repr__(self) -> str:
        """Return a compact representation without the full text."""
        return (
            f"Document(id={short_id(self.id)}, path='{self.path}', "
            f"ext='{self.ext}', size={self.size})"
        )
