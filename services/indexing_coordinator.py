"""Indexing coordinator service for ChunkSift - orchestrates collect, chunk, embed and index."""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from loguru import logger

from chunksift.core.config import ChunkSiftConfig
from core.exceptions import EmbeddingError
from core.models import Chunk, Document
from core.types import ChunkId, EmbeddingMatrix
from interfaces.embedding_provider import EmbeddingProvider
from registry import GrammarRegistry
from .chunking_service import ChunkingService
from .document_collector import DocumentCollector
from .search_service import SearchResult, SimilarityIndex


@dataclass
class IndexingResult:
    """Everything produced by one indexing run."""
    documents: list[Document]
    chunks: list[Chunk]
    id_to_idx: dict[ChunkId, int]
    index: SimilarityIndex
    stats: dict[str, Any] = field(default_factory=dict)


class IndexingCoordinator:
    """Coordinates document collection, chunking, embedding and index construction."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        config: ChunkSiftConfig | None = None,
        registry: GrammarRegistry | None = None
    ):
        """Initialize indexing coordinator.

        Args:
            embedding_provider: Provider turning chunk texts into vectors
            config: Optional configuration, defaults to ChunkSiftConfig()
            registry: Optional grammar registry, defaults to the global one
        """
        self._embedding_provider = embedding_provider
        self._config = config or ChunkSiftConfig()
        self._collector = DocumentCollector(self._config.indexing)
        self._chunker = ChunkingService(registry, self._config.chunking)

    @property
    def collector(self) -> DocumentCollector:
        return self._collector

    @property
    def chunker(self) -> ChunkingService:
        return self._chunker

    def collect(self, root: Path | str) -> list[Document]:
        """Load documents under ``root`` (raises RootNotFoundError if missing)."""
        return self._collector.collect(root)

    def chunk(self, documents: Sequence[Document]):
        """Chunk documents into a ChunkedCorpus."""
        return self._chunker.chunk_all(documents)

    def embed_texts(self, texts: Sequence[str]) -> EmbeddingMatrix:
        """Embed texts in configured batches, checking one vector per text.

        Raises:
            EmbeddingError: If the provider fails or returns a misaligned batch
        """
        batch_size = self._config.embedding.batch_size
        provider_name = getattr(self._embedding_provider, "name", None)
        vectors: EmbeddingMatrix = []

        for start in range(0, len(texts), batch_size):
            batch = list(texts[start:start + batch_size])
            try:
                batch_vectors = self._embedding_provider.embed(batch)
            except EmbeddingError:
                raise
            except Exception as e:
                raise EmbeddingError(
                    provider=provider_name, operation="embed", reason=str(e), cause=e
                ) from e

            if len(batch_vectors) != len(batch):
                raise EmbeddingError(
                    provider=provider_name,
                    operation="embed",
                    reason=f"expected {len(batch)} vectors, got {len(batch_vectors)}",
                )
            vectors.extend(list(v) for v in batch_vectors)

        return vectors

    def build_index(self, chunks: Sequence[Chunk]) -> SimilarityIndex:
        """Embed chunk texts and build the similarity index."""
        embeddings = self.embed_texts([chunk.text for chunk in chunks])
        return SimilarityIndex(chunks, embeddings)

    def index_directory(self, root: Path | str) -> IndexingResult:
        """Run the whole pipeline over a directory.

        Args:
            root: Directory to index

        Returns:
            IndexingResult with documents, chunks, ID map, index and stats
        """
        start_time = time.time()

        documents = self.collect(root)
        collected_at = time.time()

        chunks, id_to_idx = self.chunk(documents)
        chunked_at = time.time()

        index = self.build_index(chunks)
        indexed_at = time.time()

        report = self._collector.last_report
        stats = {
            "documents": len(documents),
            "skipped_files": report.skipped_count if report else 0,
            "chunks": len(chunks),
            "collect_time": collected_at - start_time,
            "chunk_time": chunked_at - collected_at,
            "embed_time": indexed_at - chunked_at,
            "total_time": indexed_at - start_time,
        }
        logger.info(
            f"Indexed {stats['documents']} documents into {stats['chunks']} chunks "
            f"in {stats['total_time']:.2f}s"
        )
        return IndexingResult(documents, chunks, id_to_idx, index, stats)

    def search(self, index: SimilarityIndex, query_text: str, k: int | None = None) -> list[SearchResult]:
        """Embed a query text and return the top-k chunks.

        Args:
            index: Index to search
            query_text: Natural language or code query
            k: Number of results, defaults to search.default_k

        Returns:
            Ranked search results
        """
        if k is None:
            k = self._config.search.default_k

        query_vector = self.embed_texts([query_text])[0]
        results = index.search_chunks(query_vector, k)
        logger.debug(f"Search for {query_text!r} returned {len(results)} results")
        return results
