"""Tree-sitter parser provider for ChunkSift - parses source and runs structural queries."""

import threading

import tree_sitter
from loguru import logger
from tree_sitter import Language as TSLanguage
from tree_sitter import Node as TSNode
from tree_sitter import Parser as TSParser
from tree_sitter import Query as TSQuery
from tree_sitter import Tree as TSTree
from tree_sitter_language_pack import get_language

from core.exceptions import ParsingError, QueryCompileError
from core.types import GrammarName
from .queries import CHUNK_CAPTURE

# tree-sitter >= 0.25 runs queries through a QueryCursor
TSQueryCursor = getattr(tree_sitter, "QueryCursor", None)

# Root node kinds of the supported grammars
TOP_LEVEL_KINDS = frozenset({
    "source_file",       # rust
    "module",            # python
    "program",           # javascript
    "translation_unit",  # c, c++, cuda
    "document",          # html
})


class TreeSitterParser:
    """Structural parser for one grammar using tree-sitter."""

    def __init__(self, grammar_name: str, language: TSLanguage | None = None):
        """Initialize tree-sitter parser.

        Args:
            grammar_name: Grammar name known to tree-sitter-language-pack
            language: Preloaded language; loaded from the language pack if None

        Raises:
            ParsingError: If the grammar cannot be loaded
        """
        self._grammar_name = GrammarName(grammar_name)
        self._queries: dict[str, TSQuery] = {}
        self._lock = threading.Lock()

        if language is None:
            try:
                language = get_language(grammar_name)
            except Exception as e:
                raise ParsingError(
                    grammar=grammar_name, operation="load_grammar", reason=str(e), cause=e
                ) from e

        self._language = language
        logger.debug(f"{grammar_name} grammar loaded")

    @property
    def grammar_name(self) -> GrammarName:
        """Name of the grammar this parser uses."""
        return self._grammar_name

    @property
    def language(self) -> TSLanguage:
        """Underlying tree-sitter language."""
        return self._language

    def parse(self, source: bytes) -> TSTree:
        """Parse source bytes into a syntax tree.

        A fresh TSParser is created per call so that documents can be
        parsed from several worker threads at once.

        Raises:
            ParsingError: If tree-sitter fails or returns no tree
        """
        try:
            tree = TSParser(self._language).parse(source)
        except Exception as e:
            raise ParsingError(
                grammar=self._grammar_name, operation="parse", reason=str(e), cause=e
            ) from e

        if tree is None:
            raise ParsingError(
                grammar=self._grammar_name, operation="parse", reason="parser returned no tree"
            )
        return tree

    def compile_query(self, query_source: str) -> TSQuery:
        """Compile a query against this grammar, caching the result.

        Raises:
            QueryCompileError: If the query is invalid for the grammar
        """
        with self._lock:
            query = self._queries.get(query_source)
            if query is not None:
                return query

            try:
                query = TSQuery(self._language, query_source)
            except Exception as e:
                raise QueryCompileError(self._grammar_name, str(e), cause=e) from e

            self._queries[query_source] = query
            return query

    def captures(self, query: TSQuery, node: TSNode, capture_name: str = CHUNK_CAPTURE) -> list[TSNode]:
        """Return the nodes captured under ``capture_name``, in match order.

        Raises:
            ParsingError: If running the query fails
        """
        try:
            if TSQueryCursor is not None:
                matches = TSQueryCursor(query).matches(node)
            else:
                matches = query.matches(node)
        except Exception as e:
            raise ParsingError(
                grammar=self._grammar_name, operation="run_query", reason=str(e), cause=e
            ) from e

        nodes: list[TSNode] = []
        for _pattern_index, captures in matches:
            captured = captures.get(capture_name)
            if captured is None:
                continue
            if isinstance(captured, list):
                nodes.extend(captured)
            else:
                nodes.append(captured)
        return nodes

    def is_top_level(self, node: TSNode) -> bool:
        """Whether the node's immediate parent is the file/module root."""
        parent = node.parent
        if parent is None:
            return False
        return parent.parent is None or parent.type in TOP_LEVEL_KINDS

    @staticmethod
    def node_span(node: TSNode, source: bytes) -> bytes:
        """Raw source bytes covered by a node."""
        return source[node.start_byte:node.end_byte]

    @staticmethod
    def node_kind(node: TSNode) -> str:
        """Grammar node-kind label of a node."""
        return node.type

    def __repr__(self) -> str:
        return f"TreeSitterParser(grammar={self._grammar_name!r})"
