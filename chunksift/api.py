"""Library entry points for ChunkSift.

Thin helpers over the service layer for callers that want the whole
pipeline in one call, plus the logging setup shared by embedding
applications.
"""

import sys
from pathlib import Path

from loguru import logger

from interfaces.embedding_provider import EmbeddingProvider
from services.indexing_coordinator import IndexingCoordinator, IndexingResult
from .core.config import ChunkSiftConfig


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru for ChunkSift.

    Args:
        verbose: Whether to enable debug logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def index_directory(
    root: Path | str,
    embedding_provider: EmbeddingProvider,
    config: ChunkSiftConfig | None = None,
) -> IndexingResult:
    """Collect, chunk, embed and index every file under ``root``.

    Args:
        root: Directory to index
        embedding_provider: Provider producing one vector per chunk text
        config: Optional configuration; loaded hierarchically from ``root`` if None

    Returns:
        IndexingResult for the run
    """
    if config is None:
        config = ChunkSiftConfig.load_hierarchical(project_dir=Path(root))
    if config.debug:
        setup_logging(verbose=True)

    coordinator = IndexingCoordinator(embedding_provider, config)
    return coordinator.index_directory(root)
