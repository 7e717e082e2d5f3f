"""
Core configuration for ChunkSift.

This package contains the unified configuration system that provides
consistent settings management for collection, chunking and search.
"""

__all__ = ["config"]
