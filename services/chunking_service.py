"""Chunking service for ChunkSift - splits documents into content-addressed chunks.

Each document ends in one of two states:

- STRUCTURED: the document's extension has a grammar, the text parses and
  both queries compile. Top-level container matches are emitted first, then
  top-level function matches. If nothing matches, the whole document
  becomes a single "document" chunk.
- NAIVE: no grammar, a parse failure or an uncompilable query. The text is
  split on blank lines into "paragraph" chunks, or a single "document"
  chunk when no paragraph survives.

Either way at least one chunk comes out and no error escapes.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, NamedTuple

from loguru import logger

from chunksift.core.config import ChunkingConfig
from core.exceptions import ParsingError
from core.identity import short_id
from core.models import Chunk, Document
from core.types import ChunkId, ChunkType, DocumentId
from interfaces.language_parser import StructuralParser
from registry import GrammarRegistry, get_registry


class ChunkedCorpus(NamedTuple):
    """Chunks of a whole collection plus the ID -> position map."""
    chunks: list[Chunk]
    id_to_idx: dict[ChunkId, int]


class ChunkingService:
    """Service turning documents into chunks using the grammar registry."""

    def __init__(
        self,
        registry: GrammarRegistry | None = None,
        config: ChunkingConfig | None = None
    ):
        """Initialize chunking service.

        Args:
            registry: Grammar registry, defaults to the global one
            config: Optional chunking configuration
        """
        self._registry = registry or get_registry()
        self._config = config or ChunkingConfig()

    @property
    def registry(self) -> GrammarRegistry:
        """Grammar registry used for extension dispatch."""
        return self._registry

    def chunk_document(self, doc: Document) -> list[Chunk]:
        """Chunk a single document.

        Args:
            doc: Document to chunk

        Returns:
            Non-empty list of chunks in emission order
        """
        parser = self._registry.lookup(doc.ext)
        if parser is None:
            logger.debug(f"No grammar for '{doc.ext}', paragraph chunking {doc.path}")
            return self.naive_chunk(doc.text, doc.id)

        try:
            chunks = self._chunk_structured(doc, parser)
        except ParsingError as e:
            logger.warning(f"Structured chunking failed for {doc.path}, using paragraphs: {e}")
            return self.naive_chunk(doc.text, doc.id)

        logger.debug(f"Chunked {doc.path} with {parser.grammar_name} grammar: {len(chunks)} chunks")
        return chunks

    def _chunk_structured(self, doc: Document, parser: StructuralParser) -> list[Chunk]:
        source = doc.text.encode("utf-8")
        tree = parser.parse(source)
        root = tree.root_node

        # Container chunks first, then function chunks
        queries = [
            parser.compile_query(query_source)
            for query_source in self._registry.queries_for(doc.ext)
            if query_source is not None
        ]

        chunks = []
        for query in queries:
            for node in parser.captures(query, root):
                if not parser.is_top_level(node):
                    continue

                span = parser.node_span(node, source)
                text = span.decode("utf-8", errors="replace").strip()
                if not text:
                    continue

                chunks.append(Chunk.create(doc.id, text, parser.node_kind(node), len(span)))

        if not chunks:
            return [self._document_chunk(doc.text, doc.id)]

        return self._deduplicate(chunks)

    def naive_chunk(self, text: str, doc_id: DocumentId) -> list[Chunk]:
        """Split text into paragraph chunks on blank lines.

        Args:
            text: Full document text
            doc_id: Owning document ID

        Returns:
            Paragraph chunks, or one "document" chunk if none survive
        """
        chunks = []
        for paragraph in text.split(self._config.paragraph_separator):
            trimmed = paragraph.strip()
            if not trimmed:
                continue
            chunks.append(Chunk.create(
                doc_id, trimmed, ChunkType.PARAGRAPH, len(paragraph.encode("utf-8"))
            ))

        if not chunks:
            return [self._document_chunk(text, doc_id)]

        return self._deduplicate(chunks)

    def _document_chunk(self, text: str, doc_id: DocumentId) -> Chunk:
        return Chunk.create(doc_id, text.strip(), ChunkType.DOCUMENT, len(text.encode("utf-8")))

    def _deduplicate(self, chunks: list[Chunk]) -> list[Chunk]:
        """Keep the first chunk for each repeated ID when deduplication is on."""
        if not self._config.deduplicate:
            return chunks

        seen: set[ChunkId] = set()
        unique = []
        for chunk in chunks:
            if chunk.id in seen:
                logger.debug(f"Dropping duplicate chunk {short_id(chunk.id)} ({chunk.chunk_type})")
                continue
            seen.add(chunk.id)
            unique.append(chunk)
        return unique

    def chunk_all(self, docs: Iterable[Document]) -> ChunkedCorpus:
        """Chunk every document in parallel and index the result.

        Per-document work runs on a thread pool; the ID map is built once,
        after every document has been chunked.

        Args:
            docs: Documents to chunk

        Returns:
            ChunkedCorpus of concatenated chunks and their ID -> index map
        """
        docs = list(docs)
        with ThreadPoolExecutor(max_workers=self._config.max_workers,
                                thread_name_prefix="ChunkingService") as executor:
            per_document = list(executor.map(self.chunk_document, docs))

        chunks = [chunk for doc_chunks in per_document for chunk in doc_chunks]
        id_to_idx = build_id_index(chunks)

        logger.info(f"Chunked {len(docs)} documents into {len(chunks)} chunks")
        return ChunkedCorpus(chunks, id_to_idx)

    @staticmethod
    def validate_doc_refs(chunks: Iterable[Chunk], docs: Iterable[Document]) -> list[Chunk]:
        """Return the chunks whose doc_id does not resolve to any document."""
        known = {doc.id for doc in docs}
        orphans = [chunk for chunk in chunks if chunk.doc_id not in known]
        if orphans:
            logger.warning(f"{len(orphans)} chunks reference unknown documents")
        return orphans


def build_id_index(chunks: Iterable[Chunk]) -> dict[ChunkId, int]:
    """Map chunk IDs to positions; a repeated ID maps to its last position."""
    return {chunk.id: i for i, chunk in enumerate(chunks)}


def chunk_document(doc: Document) -> list[Chunk]:
    """Chunk one document with the default service."""
    return ChunkingService().chunk_document(doc)


def chunk_all(docs: Iterable[Document]) -> ChunkedCorpus:
    """Chunk a collection of documents with the default service."""
    return ChunkingService().chunk_all(docs)
