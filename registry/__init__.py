"""Grammar registry for ChunkSift - maps file extensions to grammars and their queries."""

import threading
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from loguru import logger

from core.exceptions import ParsingError
from core.types import GrammarName
from providers.parsing.queries import GRAMMAR_QUERIES
from providers.parsing.tree_sitter_parser import TreeSitterParser


@dataclass(frozen=True)
class GrammarSpec:
    """One row of the grammar table."""
    name: GrammarName
    container_query: Optional[str]
    function_query: Optional[str]


# extension (lowercase, no dot) -> grammar name
EXTENSION_GRAMMARS: Dict[str, GrammarName] = {
    "rs": "rust",
    "py": "python",
    "js": "javascript",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "hpp": "cpp",
    "cu": "cuda",
    "html": "html",
}


def _build_table() -> Dict[str, GrammarSpec]:
    table = {}
    for ext, grammar in EXTENSION_GRAMMARS.items():
        container_query, function_query = GRAMMAR_QUERIES[grammar]
        table[ext] = GrammarSpec(GrammarName(grammar), container_query, function_query)
    return table


class GrammarRegistry:
    """Registry resolving file extensions to loaded grammars.

    The extension table is fixed data; adding a language means adding a
    row to EXTENSION_GRAMMARS and GRAMMAR_QUERIES. Grammars are loaded
    lazily on first use and cached per grammar name, including failures.
    """

    def __init__(self, table: Optional[Dict[str, GrammarSpec]] = None):
        """Initialize the grammar registry.

        Args:
            table: Optional extension table, defaults to the built-in one
        """
        self._table = dict(table) if table is not None else _build_table()
        self._parsers: Dict[str, Optional[TreeSitterParser]] = {}
        self._load_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    @property
    def extensions(self) -> set[str]:
        """Extensions with a registered grammar."""
        return set(self._table)

    def spec_for(self, extension: str) -> Optional[GrammarSpec]:
        """Get the table row for an extension."""
        return self._table.get(extension.lower())

    def lookup(self, extension: str) -> Optional[TreeSitterParser]:
        """Get the parser for an extension.

        Args:
            extension: File extension without the leading dot

        Returns:
            Parser for the extension's grammar, or None if the extension is
            unknown or its grammar could not be loaded
        """
        spec = self.spec_for(extension)
        if spec is None:
            return None

        if spec.name in self._parsers:
            return self._parsers[spec.name]

        # Only lookups of the same grammar wait on a load in progress
        with self._lock:
            load_lock = self._load_locks.setdefault(spec.name, threading.Lock())

        with load_lock:
            if spec.name not in self._parsers:
                self._parsers[spec.name] = self._load(spec.name)
            return self._parsers[spec.name]

    def queries_for(self, extension: str) -> Tuple[Optional[str], Optional[str]]:
        """Get the (container query, function query) pair for an extension."""
        spec = self.spec_for(extension)
        if spec is None:
            return None, None
        return spec.container_query, spec.function_query

    def _load(self, grammar_name: str) -> Optional[TreeSitterParser]:
        try:
            return TreeSitterParser(grammar_name)
        except ParsingError as e:
            logger.warning(f"Grammar {grammar_name} unavailable, falling back to paragraphs: {e}")
            return None


# Global registry instance
_registry: Optional[GrammarRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> GrammarRegistry:
    """Get the global grammar registry instance.

    Returns:
        Global GrammarRegistry instance
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = GrammarRegistry()
        return _registry


def lookup(extension: str) -> Optional[TreeSitterParser]:
    """Look up the parser for an extension in the global registry."""
    return get_registry().lookup(extension)


def queries_for(extension: str) -> Tuple[Optional[str], Optional[str]]:
    """Look up the query pair for an extension in the global registry."""
    return get_registry().queries_for(extension)


__all__ = [
    'GrammarSpec',
    'GrammarRegistry',
    'EXTENSION_GRAMMARS',
    'get_registry',
    'lookup',
    'queries_for',
]
