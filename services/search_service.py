"""Search service for ChunkSift - exact top-k cosine similarity over chunk embeddings."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from loguru import logger

from core.exceptions import DimensionMismatchError, InvalidIndexError, ValidationError
from core.models import Chunk
from core.types import ChunkId, Dimensions, EmbeddingMatrix, EmbeddingVector, Score, SearchHit
from .chunking_service import build_id_index


@dataclass(frozen=True)
class SearchResult:
    """A ranked search hit resolved to its chunk."""
    index: int
    score: Score
    chunk: Chunk


class SimilarityIndex:
    """Immutable brute-force cosine similarity index.

    ``chunks[i]`` and ``embeddings[i]`` describe the same chunk. Scores
    against a zero-norm vector (stored or query) are 0.0 rather than NaN,
    and those entries still take part in ranking.
    """

    def __init__(self, chunks: Sequence[Chunk], embeddings: EmbeddingMatrix):
        """Build the index.

        Args:
            chunks: Chunks, position-aligned with ``embeddings``
            embeddings: One vector per chunk, all of the same dimension

        Raises:
            DimensionMismatchError: If the counts differ or vectors are ragged
        """
        if len(chunks) != len(embeddings):
            raise DimensionMismatchError(len(chunks), len(embeddings), what="embedding count")

        self._chunks = list(chunks)
        self._matrix = self._to_matrix(embeddings)
        self._norms = np.linalg.norm(self._matrix, axis=1)
        self._id_to_idx = build_id_index(self._chunks)

        logger.debug(f"Built similarity index: {len(self._chunks)} chunks, {self.dims} dims")

    @staticmethod
    def _to_matrix(embeddings: EmbeddingMatrix) -> np.ndarray:
        if len(embeddings) == 0:
            return np.zeros((0, 0), dtype=np.float32)

        expected = len(embeddings[0])
        for vector in embeddings:
            if len(vector) != expected:
                raise DimensionMismatchError(expected, len(vector))
        return np.asarray(embeddings, dtype=np.float32).reshape(len(embeddings), expected)

    @property
    def chunks(self) -> list[Chunk]:
        """Indexed chunks, in index order."""
        return list(self._chunks)

    @property
    def dims(self) -> Dimensions:
        """Embedding dimension (0 for an empty index)."""
        return Dimensions(int(self._matrix.shape[1]))

    @property
    def id_to_idx(self) -> dict[ChunkId, int]:
        """Chunk ID -> position map (last position wins for repeated IDs)."""
        return dict(self._id_to_idx)

    def __len__(self) -> int:
        return len(self._chunks)

    def scores(self, query: EmbeddingVector) -> np.ndarray:
        """Cosine similarity of every stored embedding against ``query``.

        Raises:
            DimensionMismatchError: If the query dimension differs from the index
        """
        q = np.asarray(query, dtype=np.float32).reshape(-1)
        if len(self._chunks) == 0:
            return np.zeros(0, dtype=np.float32)
        if q.shape[0] != self.dims:
            raise DimensionMismatchError(self.dims, q.shape[0])

        q_norm = float(np.linalg.norm(q))
        if q_norm == 0.0:
            return np.zeros(len(self._chunks), dtype=np.float32)

        denominators = self._norms * q_norm
        dots = self._matrix @ q
        out = np.zeros_like(dots)
        np.divide(dots, denominators, out=out, where=denominators > 0)
        return out

    def search(self, query: EmbeddingVector, k: int) -> list[SearchHit]:
        """Return the top-k ``(index, score)`` pairs by descending similarity.

        Ties keep original index order. ``k`` larger than the index returns
        every entry.

        Raises:
            ValidationError: If ``k`` is negative
            DimensionMismatchError: If the query dimension differs from the index
        """
        if k < 0:
            raise ValidationError("k", k, "k cannot be negative")

        scores = self.scores(query)
        order = np.argsort(-scores, kind="stable")[:k]
        return [(int(i), Score(float(scores[i]))) for i in order]

    def search_chunks(self, query: EmbeddingVector, k: int) -> list[SearchResult]:
        """Like search(), with each hit resolved to its chunk."""
        return [SearchResult(i, score, self._chunks[i]) for i, score in self.search(query, k)]

    def retrieve(self, idx: int) -> Chunk:
        """Positional lookup.

        Raises:
            InvalidIndexError: If ``idx`` is outside the index
        """
        if not 0 <= idx < len(self._chunks):
            raise InvalidIndexError(idx, len(self._chunks))
        return self._chunks[idx]

    def index_of(self, chunk_id: ChunkId) -> int | None:
        """Position of a chunk ID, or None if it is not indexed."""
        return self._id_to_idx.get(chunk_id)

    def get(self, chunk_id: ChunkId) -> Chunk | None:
        """Chunk for an ID, or None if it is not indexed."""
        idx = self._id_to_idx.get(chunk_id)
        return None if idx is None else self._chunks[idx]


def cosine_similarity(a: EmbeddingVector, b: EmbeddingVector) -> Score:
    """Cosine similarity of two vectors; 0.0 if either has zero norm."""
    va = np.asarray(a, dtype=np.float32)
    vb = np.asarray(b, dtype=np.float32)
    if va.shape != vb.shape:
        raise DimensionMismatchError(va.shape[0], vb.shape[0])
    denominator = float(np.linalg.norm(va)) * float(np.linalg.norm(vb))
    if denominator == 0.0:
        return Score(0.0)
    return Score(float(np.dot(va, vb)) / denominator)
