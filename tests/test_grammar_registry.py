"""Tests for the grammar registry and the tree-sitter parser wrapper."""

import threading
from unittest.mock import patch

import pytest

import registry
from core.exceptions import ParsingError, QueryCompileError
from providers.parsing import GRAMMAR_QUERIES, TreeSitterParser
from registry import EXTENSION_GRAMMARS, GrammarRegistry, GrammarSpec


@pytest.fixture
def grammar_registry():
    return GrammarRegistry()


class TestGrammarRegistry:
    """Test extension lookup."""

    def test_unknown_extension(self, grammar_registry):
        assert grammar_registry.lookup("txt") is None
        assert grammar_registry.lookup("") is None
        assert grammar_registry.queries_for("md") == (None, None)

    def test_known_extensions(self, grammar_registry):
        assert grammar_registry.extensions == {"rs", "py", "js", "c", "h", "cpp", "hpp", "cu", "html"}

    def test_lookup_is_case_insensitive(self, grammar_registry):
        assert grammar_registry.spec_for("PY") == grammar_registry.spec_for("py")

    def test_lookup_caches_parser_per_grammar(self, grammar_registry):
        c_parser = grammar_registry.lookup("c")
        h_parser = grammar_registry.lookup("h")

        assert c_parser is not None
        assert c_parser is h_parser
        assert c_parser.grammar_name == "c"

    def test_queries_for(self, grammar_registry):
        container, function = grammar_registry.queries_for("rs")

        assert "struct_item" in container
        assert "function_item" in function

    def test_html_has_no_function_query(self, grammar_registry):
        container, function = grammar_registry.queries_for("html")

        assert container is not None
        assert function is None

    def test_unloadable_grammar_cached_as_none(self):
        grammar_registry = GrammarRegistry({"zz": GrammarSpec("no-such-grammar", None, None)})

        assert grammar_registry.lookup("zz") is None
        assert grammar_registry.lookup("zz") is None

    def test_slow_grammar_load_does_not_block_other_grammars(self):
        started = threading.Event()
        release = threading.Event()

        class SlowParser:
            def __init__(self, grammar_name):
                self.grammar_name = grammar_name
                if grammar_name == "python":
                    started.set()
                    release.wait(timeout=10)

        grammar_registry = GrammarRegistry()
        with patch("registry.TreeSitterParser", SlowParser):
            loader = threading.Thread(target=grammar_registry.lookup, args=("py",))
            loader.start()
            try:
                assert started.wait(timeout=10)
                assert grammar_registry.lookup("rs").grammar_name == "rust"
                assert loader.is_alive()
            finally:
                release.set()
                loader.join(timeout=10)

        assert grammar_registry.lookup("py").grammar_name == "python"

    def test_global_registry(self):
        assert registry.get_registry() is registry.get_registry()
        assert registry.queries_for("py") == registry.get_registry().queries_for("py")


class TestGrammarQueries:
    """Every shipped query compiles against its grammar."""

    @pytest.mark.parametrize("ext", sorted(EXTENSION_GRAMMARS))
    def test_queries_compile(self, grammar_registry, ext):
        parser = grammar_registry.lookup(ext)
        assert parser is not None, f"grammar for .{ext} failed to load"

        for query_src in grammar_registry.queries_for(ext):
            if query_src is not None:
                assert parser.compile_query(query_src) is not None

    def test_every_grammar_has_queries(self):
        assert set(EXTENSION_GRAMMARS.values()) <= set(GRAMMAR_QUERIES)


class TestTreeSitterParser:
    """Test the parser wrapper directly."""

    def test_unknown_grammar(self):
        with pytest.raises(ParsingError):
            TreeSitterParser("no-such-grammar")

    def test_bad_query(self):
        parser = TreeSitterParser("python")

        with pytest.raises(QueryCompileError):
            parser.compile_query("(not_a_real_node) @chunk")

    def test_compiled_queries_are_cached(self):
        parser = TreeSitterParser("python")
        query_src = "(function_definition) @chunk"

        assert parser.compile_query(query_src) is parser.compile_query(query_src)

    def test_captures_and_top_level(self):
        parser = TreeSitterParser("python")
        source = b"def outer():\n    def inner():\n        pass\n"
        tree = parser.parse(source)
        query = parser.compile_query("(function_definition) @chunk")

        nodes = parser.captures(query, tree.root_node)
        top_level = [n for n in nodes if parser.is_top_level(n)]

        assert len(nodes) == 2
        assert len(top_level) == 1
        assert parser.node_span(top_level[0], source).startswith(b"def outer")
