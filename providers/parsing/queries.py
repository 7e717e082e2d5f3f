"""Structural query definitions per grammar.

Each grammar carries two tree-sitter queries: a container query for
type/namespace/module level declarations and a function query for callable
declarations. Only nodes captured as ``@chunk`` become chunk candidates;
other capture names may be used inside a pattern to constrain it.
"""

from typing import Dict, Optional, Tuple

CHUNK_CAPTURE = "chunk"

RUST_CONTAINER_QUERY = """
;; Rust container items
(struct_item) @chunk
(impl_item) @chunk
(mod_item) @chunk
(enum_item) @chunk
(trait_item) @chunk
"""

RUST_FUNCTION_QUERY = """
;; Rust functions
(function_item) @chunk
"""

PYTHON_CONTAINER_QUERY = """
;; Python classes, including decorated ones
(class_definition) @chunk
(decorated_definition
  definition: (class_definition)) @chunk
"""

PYTHON_FUNCTION_QUERY = """
;; Python functions, including decorated ones
(function_definition) @chunk
(decorated_definition
  definition: (function_definition)) @chunk
"""

JAVASCRIPT_CONTAINER_QUERY = """
;; JavaScript classes, including exported ones
(class_declaration) @chunk
(export_statement
  declaration: (class_declaration)) @chunk
"""

JAVASCRIPT_FUNCTION_QUERY = """
;; JavaScript functions and bindings, including exported ones
(function_declaration) @chunk
(generator_function_declaration) @chunk
(lexical_declaration) @chunk
(variable_declaration) @chunk
(export_statement
  declaration: [
    (function_declaration)
    (generator_function_declaration)
    (lexical_declaration)
    (variable_declaration)
  ]) @chunk
"""

C_CONTAINER_QUERY = """
;; C containers
(struct_specifier) @chunk
(union_specifier) @chunk
(enum_specifier) @chunk
(type_definition) @chunk
"""

C_FUNCTION_QUERY = """
;; C functions and declarations
(function_definition) @chunk
(declaration) @chunk
"""

CPP_CONTAINER_QUERY = """
;; C++/CUDA containers
(class_specifier) @chunk
(struct_specifier) @chunk
(union_specifier) @chunk
(enum_specifier) @chunk
(namespace_definition) @chunk
"""

CPP_FUNCTION_QUERY = """
;; C++/CUDA functions
(function_definition) @chunk
(template_declaration) @chunk
(declaration) @chunk
"""

HTML_CONTAINER_QUERY = """
;; HTML: top-level elements
(element) @chunk
"""

# grammar name -> (container query, function query)
GRAMMAR_QUERIES: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "rust": (RUST_CONTAINER_QUERY, RUST_FUNCTION_QUERY),
    "python": (PYTHON_CONTAINER_QUERY, PYTHON_FUNCTION_QUERY),
    "javascript": (JAVASCRIPT_CONTAINER_QUERY, JAVASCRIPT_FUNCTION_QUERY),
    "c": (C_CONTAINER_QUERY, C_FUNCTION_QUERY),
    "cpp": (CPP_CONTAINER_QUERY, CPP_FUNCTION_QUERY),
    "cuda": (CPP_CONTAINER_QUERY, CPP_FUNCTION_QUERY),
    "html": (HTML_CONTAINER_QUERY, None),
}
