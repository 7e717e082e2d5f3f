"""
Configuration management package for ChunkSift.

This package provides a unified configuration system that supports:
- Multiple configuration sources (environment variables, config files, runtime overrides)
- Type-safe configuration validation using Pydantic
"""

from .unified_config import (
    ChunkingConfig,
    ChunkSiftConfig,
    EmbeddingSettings,
    IndexingConfig,
    SearchConfig,
    get_config,
    reset_config,
    set_config,
)

__all__ = [
    "ChunkSiftConfig",
    "IndexingConfig",
    "ChunkingConfig",
    "EmbeddingSettings",
    "SearchConfig",
    "get_config",
    "set_config",
    "reset_config",
]
