"""EmbeddingProvider protocol for ChunkSift - abstract interface for embedding implementations."""

from collections.abc import Sequence
from typing import Protocol

from core.types import Dimensions, EmbeddingMatrix


class EmbeddingProvider(Protocol):
    """Abstract protocol for embedding providers.

    ChunkSift does not generate embeddings itself. Any object satisfying
    this protocol (a local model wrapper, an HTTP client, a test double)
    can feed the similarity index.
    """

    @property
    def name(self) -> str:
        """Provider name (e.g., 'fastembed', 'openai')."""
        ...

    @property
    def dims(self) -> Dimensions:
        """Embedding dimensions."""
        ...

    def embed(self, texts: Sequence[str]) -> EmbeddingMatrix:
        """Generate embeddings for a sequence of texts.

        Args:
            texts: Texts to embed

        Returns:
            One fixed-dimension vector per input text, in input order
        """
        ...
