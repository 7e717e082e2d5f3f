"""ChunkSift - Syntax-aware, content-addressed chunking and similarity search for source trees."""

__version__ = "0.1.0"
__description__ = "Syntax-aware, content-addressed chunking and similarity search for source trees"

# Import modules only when needed to avoid circular imports with the service layer
__all__ = [
    "grab_documents",
    "chunk_document",
    "chunk_all",
    "SimilarityIndex",
    "IndexingCoordinator",
    "index_directory",
    "setup_logging",
]


def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "grab_documents":
        from services.document_collector import grab_documents
        return grab_documents
    elif name == "chunk_document":
        from services.chunking_service import chunk_document
        return chunk_document
    elif name == "chunk_all":
        from services.chunking_service import chunk_all
        return chunk_all
    elif name == "SimilarityIndex":
        from services.search_service import SimilarityIndex
        return SimilarityIndex
    elif name == "IndexingCoordinator":
        from services.indexing_coordinator import IndexingCoordinator
        return IndexingCoordinator
    elif name in ("index_directory", "setup_logging"):
        from . import api
        return getattr(api, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
