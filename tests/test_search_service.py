"""Tests for SimilarityIndex ranking and lookup."""

import math

import numpy as np
import pytest

from core.exceptions import DimensionMismatchError, InvalidIndexError, ValidationError
from core.models import Chunk, Document
from core.types import ChunkType
from services.search_service import SimilarityIndex, cosine_similarity


def make_chunks(*texts):
    doc = Document.from_text("corpus.txt", "\n\n".join(texts))
    return [Chunk.create(doc.id, text, ChunkType.PARAGRAPH, len(text)) for text in texts]


@pytest.fixture
def small_index():
    """Three 2-d vectors: x axis, y axis and the diagonal."""
    chunks = make_chunks("x", "y", "xy")
    return SimilarityIndex(chunks, [[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])


class TestSearch:
    """Test top-k search."""

    def test_top_two(self, small_index):
        results = small_index.search([1.0, 0.0], 2)

        assert [i for i, _ in results] == [0, 2]
        assert results[0][1] == pytest.approx(1.0)
        assert results[1][1] == pytest.approx(1 / math.sqrt(2), abs=1e-6)

    def test_k_larger_than_index_returns_everything_once(self, small_index):
        results = small_index.search([1.0, 0.0], 10)

        assert sorted(i for i, _ in results) == [0, 1, 2]

    def test_k_zero(self, small_index):
        assert small_index.search([1.0, 0.0], 0) == []

    def test_negative_k_rejected(self, small_index):
        with pytest.raises(ValidationError):
            small_index.search([1.0, 0.0], -1)

    def test_ties_keep_index_order(self):
        chunks = make_chunks("a", "b", "c", "d")
        index = SimilarityIndex(chunks, [[0.0, 1.0], [2.0, 0.0], [1.0, 0.0], [3.0, 0.0]])

        results = index.search([1.0, 0.0], 4)

        assert [i for i, _ in results] == [1, 2, 3, 0]

    def test_scores_non_increasing(self):
        rng = np.random.default_rng(7)
        vectors = rng.normal(size=(50, 8)).tolist()
        index = SimilarityIndex(make_chunks(*[f"c{i}" for i in range(50)]), vectors)

        scores = [score for _, score in index.search(rng.normal(size=8).tolist(), 50)]

        assert all(a >= b for a, b in zip(scores, scores[1:]))
        assert all(-1.0 - 1e-6 <= s <= 1.0 + 1e-6 for s in scores)

    def test_search_chunks_resolves_hits(self, small_index):
        (top,) = small_index.search_chunks([0.0, 5.0], 1)

        assert top.index == 1
        assert top.chunk.text == "y"
        assert top.score == pytest.approx(1.0)


class TestZeroNorm:
    """Zero vectors score 0.0 and still take part in ranking."""

    def test_zero_query(self, small_index):
        results = small_index.search([0.0, 0.0], 3)

        assert [i for i, _ in results] == [0, 1, 2]
        assert all(score == 0.0 for _, score in results)

    def test_zero_stored_vector(self):
        index = SimilarityIndex(make_chunks("zero", "neg", "pos"), [[0.0, 0.0], [-1.0, 0.0], [1.0, 0.0]])

        results = index.search([1.0, 0.0], 3)

        assert [i for i, _ in results] == [2, 0, 1]
        assert results[1][1] == 0.0
        assert not any(math.isnan(score) for _, score in results)


class TestValidation:
    """Test construction and query checks."""

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            SimilarityIndex(make_chunks("a", "b"), [[1.0, 0.0]])

    def test_ragged_vectors(self):
        with pytest.raises(DimensionMismatchError):
            SimilarityIndex(make_chunks("a", "b"), [[1.0, 0.0], [1.0, 0.0, 0.0]])

    def test_query_dimension_mismatch(self, small_index):
        with pytest.raises(DimensionMismatchError) as exc_info:
            small_index.search([1.0, 0.0, 0.0], 1)

        assert exc_info.value.expected == 2
        assert exc_info.value.got == 3

    def test_empty_index(self):
        index = SimilarityIndex([], [])

        assert len(index) == 0
        assert index.dims == 0
        assert index.search([1.0, 2.0], 5) == []


class TestLookup:
    """Test positional and ID lookup."""

    def test_retrieve(self, small_index):
        assert small_index.retrieve(2).text == "xy"

    @pytest.mark.parametrize("idx", [3, 100, -1])
    def test_retrieve_out_of_range(self, small_index, idx):
        with pytest.raises(InvalidIndexError):
            small_index.retrieve(idx)

    def test_index_of_and_get(self, small_index):
        chunk = small_index.chunks[1]

        assert small_index.index_of(chunk.id) == 1
        assert small_index.get(chunk.id) == chunk
        assert small_index.index_of(b"\x00" * 32) is None
        assert small_index.get(b"\x00" * 32) is None

    def test_id_to_idx_covers_every_chunk(self, small_index):
        assert {small_index.retrieve(i).id: i for i in range(len(small_index))} == small_index.id_to_idx


class TestCosineSimilarity:
    """Test the pairwise helper."""

    def test_orthogonal(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_parallel(self):
        assert cosine_similarity([2.0, 2.0], [1.0, 1.0]) == pytest.approx(1.0)

    def test_zero_norm(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0

    def test_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            cosine_similarity([1.0], [1.0, 2.0])
