"""StructuralParser protocol for ChunkSift - abstract interface for the grammar/parsing service."""

from typing import Any, Protocol


class StructuralParser(Protocol):
    """Abstract protocol for grammar-backed parsers.

    Given source bytes, a parser produces a concrete syntax tree; given a
    tree and a declarative node-pattern query, it produces the matching
    nodes with their byte spans and node-kind labels. Parse and query
    compile failures are raised as ParsingError so the caller can recover
    locally.
    """

    @property
    def grammar_name(self) -> str:
        """Name of the grammar this parser uses (e.g., 'rust')."""
        ...

    def parse(self, source: bytes) -> Any:
        """Parse source bytes into a syntax tree.

        Args:
            source: UTF-8 encoded source text

        Returns:
            Tree object exposing ``root_node``

        Raises:
            ParsingError: If the grammar cannot produce a tree
        """
        ...

    def compile_query(self, query_source: str) -> Any:
        """Compile a node-pattern query against this parser's grammar.

        Raises:
            QueryCompileError: If the query is invalid for the grammar
        """
        ...

    def captures(self, query: Any, node: Any, capture_name: str = "chunk") -> list[Any]:
        """Run a compiled query and return captured nodes in match order."""
        ...

    def is_top_level(self, node: Any) -> bool:
        """Whether the node's immediate parent is the file/module root."""
        ...

    def node_span(self, node: Any, source: bytes) -> bytes:
        """Raw source bytes covered by a node."""
        ...

    def node_kind(self, node: Any) -> str:
        """Grammar node-kind label of a node (e.g., 'function_item')."""
        ...
