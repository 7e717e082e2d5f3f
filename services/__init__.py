"""Service layer for ChunkSift - collection, chunking, search and pipeline coordination."""

from .chunking_service import ChunkedCorpus, ChunkingService, build_id_index, chunk_all, chunk_document
from .document_collector import CollectionReport, DocumentCollector, grab_documents
from .indexing_coordinator import IndexingCoordinator, IndexingResult
from .search_service import SearchResult, SimilarityIndex, cosine_similarity

__all__ = [
    'DocumentCollector',
    'CollectionReport',
    'grab_documents',
    'ChunkingService',
    'ChunkedCorpus',
    'build_id_index',
    'chunk_document',
    'chunk_all',
    'SimilarityIndex',
    'SearchResult',
    'cosine_similarity',
    'IndexingCoordinator',
    'IndexingResult',
]
