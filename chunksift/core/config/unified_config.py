"""
Unified configuration system for ChunkSift.

This module provides a single, type-safe configuration model covering
document collection, chunking, embedding batching and search, with
hierarchical loading from multiple sources.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError


class IndexingConfig(BaseModel):
    """Document collection configuration."""

    include_patterns: list[str] = Field(
        default_factory=lambda: ['*'],
        description="Glob patterns (root-relative POSIX paths) to include"
    )

    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns (root-relative POSIX paths) to exclude"
    )

    max_workers: int = Field(
        default=8,
        ge=1,
        le=256,
        description="Worker threads used to load files"
    )

    follow_symlinks: bool = Field(
        default=False,
        description="Descend into symlinked directories while walking"
    )


class ChunkingConfig(BaseModel):
    """Chunking engine configuration."""

    paragraph_separator: str = Field(
        default='\n\n',
        min_length=1,
        description="Separator used by the paragraph fallback"
    )

    deduplicate: bool = Field(
        default=True,
        description="Drop chunks whose ID repeats within one document"
    )

    max_workers: int = Field(
        default=8,
        ge=1,
        le=256,
        description="Worker threads used to chunk documents"
    )


class EmbeddingSettings(BaseModel):
    """Embedding batching configuration."""

    batch_size: int = Field(
        default=64,
        ge=1,
        le=10000,
        description="Number of chunk texts sent to the embedder per call"
    )


class SearchConfig(BaseModel):
    """Similarity search configuration."""

    default_k: int = Field(
        default=10,
        ge=1,
        le=10000,
        description="Number of results returned when k is not given"
    )


class ChunkSiftConfig(BaseSettings):
    """
    Unified configuration for ChunkSift.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Project config file (.chunksift.json)
    3. User config file (~/.chunksift/config.json)
    4. Environment variables (CHUNKSIFT_*)
    5. Default values (lowest priority)

    Environment Variable Examples:
        CHUNKSIFT_INDEXING__MAX_WORKERS=16
        CHUNKSIFT_CHUNKING__DEDUPLICATE=false
        CHUNKSIFT_EMBEDDING__BATCH_SIZE=128
        CHUNKSIFT_SEARCH__DEFAULT_K=5
        CHUNKSIFT_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='CHUNKSIFT_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
    )

    indexing: IndexingConfig = Field(
        default_factory=IndexingConfig,
        description="Document collection configuration"
    )

    chunking: ChunkingConfig = Field(
        default_factory=ChunkingConfig,
        description="Chunking configuration"
    )

    embedding: EmbeddingSettings = Field(
        default_factory=EmbeddingSettings,
        description="Embedding batching configuration"
    )

    search: SearchConfig = Field(
        default_factory=SearchConfig,
        description="Similarity search configuration"
    )

    # Global settings
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          **override_values: Any) -> 'ChunkSiftConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .chunksift.json
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If a config file exists but cannot be parsed
        """
        config_data: dict[str, Any] = {}

        # 1. User config file (~/.chunksift/config.json)
        user_config_path = Path.home() / '.chunksift' / 'config.json'
        _merge(config_data, _read_json(user_config_path))

        # 2. Project config file (.chunksift.json)
        if project_dir is None:
            project_dir = Path.cwd()
        _merge(config_data, _read_json(project_dir / '.chunksift.json'))

        # 3. Runtime overrides
        _merge(config_data, override_values)

        # 4. Create instance; environment variables fill whatever the
        # files and overrides leave unset
        return cls(**config_data)

    @field_validator('indexing')
    def validate_indexing_config(cls, v: IndexingConfig) -> IndexingConfig:
        """Require at least one include pattern."""
        if not v.include_patterns:
            raise ValueError("indexing.include_patterns must not be empty")
        return v

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json')

    def save_to_file(self, file_path: Path) -> None:
        """
        Save configuration to JSON file.

        Args:
            file_path: Path to save configuration file
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def __repr__(self) -> str:
        return (
            f"ChunkSiftConfig("
            f"indexing.max_workers={self.indexing.max_workers}, "
            f"chunking.deduplicate={self.chunking.deduplicate}, "
            f"embedding.batch_size={self.embedding.batch_size}, "
            f"search.default_k={self.search.default_k}, "
            f"debug={self.debug})"
        )


def _read_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(config_key=str(path), reason=f"Failed to load config file: {e}")
    if not isinstance(data, dict):
        raise ConfigurationError(config_key=str(path), reason="Config file must contain a JSON object")
    return data


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    """Merge ``source`` into ``target``, one level deep for section dicts."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


# Global configuration instance
_config_instance: ChunkSiftConfig | None = None


def get_config() -> ChunkSiftConfig:
    """
    Get the global configuration instance.

    Returns:
        Global ChunkSiftConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = ChunkSiftConfig.load_hierarchical()
    return _config_instance


def set_config(config: ChunkSiftConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
