"""ChunkSift Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the ChunkSift system. These
exceptions provide clear error categorization and enable proper error handling
throughout the application.
"""

from typing import Optional, Any, Dict


class ChunkSiftError(Exception):
    """Base exception for all ChunkSift-specific errors.

    This is the root exception class that all other ChunkSift exceptions
    inherit from. It provides common functionality for error handling,
    context tracking, and debugging.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize ChunkSift error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., paths, chunk IDs)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "ChunkSiftError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(ChunkSiftError):
    """Raised when data validation fails.

    This exception is used when input data doesn't meet expected format,
    type, or business rule requirements.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class CollectionError(ChunkSiftError):
    """Raised when document collection cannot proceed at all.

    Failures on individual files are never raised; they are logged and the
    file is dropped. Only run-level problems surface through this type.
    """

    def __init__(
        self,
        root: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize collection error.

        Args:
            root: Root directory being collected
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        prefix = f"Collection error (root={root})" if root else "Collection error"
        message = f"{prefix}: {reason}" if reason else prefix
        super().__init__(message, context, cause)
        self.root = root
        self.reason = reason


class RootNotFoundError(CollectionError):
    """Raised when the collection root does not exist."""

    def __init__(self, root: str):
        super().__init__(root=root, reason=f"Root path does not exist: {root}")


class ParsingError(ChunkSiftError):
    """Raised when parsing source text or compiling a query fails.

    The chunking engine catches this and degrades to paragraph splitting;
    it never escapes a chunking call.
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        grammar: Optional[str] = None,
        operation: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize parsing error.

        Args:
            file_path: Path to the document that failed to parse
            grammar: Grammar being used
            operation: Parsing operation that failed (e.g., "parse", "compile_query")
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        parts = []
        if file_path:
            parts.append(f"file={file_path}")
        if grammar:
            parts.append(f"grammar={grammar}")
        if operation:
            parts.append(f"operation={operation}")

        prefix = f"Parsing error ({', '.join(parts)})" if parts else "Parsing error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.file_path = file_path
        self.grammar = grammar
        self.operation = operation
        self.reason = reason


class QueryCompileError(ParsingError):
    """Raised when a structural query does not compile against its grammar."""

    def __init__(self, grammar: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(grammar=grammar, operation="compile_query", reason=reason, cause=cause)


class IndexingError(ChunkSiftError):
    """Raised when the similarity index is used against its contract.

    These are programmer errors: the caller passed misaligned data or an
    index outside the collection.
    """


class DimensionMismatchError(IndexingError):
    """Raised when vector counts or dimensions do not line up."""

    def __init__(self, expected: int, got: int, what: str = "dimension"):
        """Initialize dimension mismatch error.

        Args:
            expected: Expected count or dimension
            got: Actual count or dimension
            what: Which quantity mismatched (e.g., "dimension", "embedding count")
        """
        super().__init__(
            f"Dimension mismatch: expected {what} {expected}, got {got}",
            {"expected": expected, "got": got},
        )
        self.expected = expected
        self.got = got
        self.what = what


class InvalidIndexError(IndexingError):
    """Raised when retrieving a position outside the index."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid index: {index}", {"size": size})
        self.index = index
        self.size = size


class EmbeddingError(ChunkSiftError):
    """Raised when the external embedding provider breaks its contract."""

    def __init__(
        self,
        provider: Optional[str] = None,
        operation: Optional[str] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize embedding error.

        Args:
            provider: Embedding provider name
            operation: Operation that failed (e.g., "embed")
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        parts = []
        if provider:
            parts.append(f"provider={provider}")
        if operation:
            parts.append(f"operation={operation}")

        prefix = f"Embedding error ({', '.join(parts)})" if parts else "Embedding error"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.provider = provider
        self.operation = operation
        self.reason = reason


class ConfigurationError(ChunkSiftError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
