"""Document collector service for ChunkSift - walks a root directory and loads text files."""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path

from loguru import logger

from chunksift.core.config import IndexingConfig
from core.exceptions import RootNotFoundError
from core.models import Document, normalize_path


@dataclass
class CollectionReport:
    """Diagnostics for one collection run."""
    root: str
    discovered: int = 0
    loaded: int = 0
    skipped: dict[str, str] = field(default_factory=dict)
    walk_errors: list[str] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class DocumentCollector:
    """Collects every readable UTF-8 file under a root directory as a Document.

    Files that cannot be read or decoded are dropped with a warning and
    recorded in the last report; only a missing root fails the run.
    """

    def __init__(self, config: IndexingConfig | None = None):
        """Initialize document collector.

        Args:
            config: Optional indexing configuration
        """
        self._config = config or IndexingConfig()
        self._last_report: CollectionReport | None = None

    @property
    def last_report(self) -> CollectionReport | None:
        """Report of the most recent collect() call."""
        return self._last_report

    def collect(self, root: Path | str) -> list[Document]:
        """Load all documents under ``root``.

        Args:
            root: Directory to walk

        Returns:
            Loaded documents, in no particular order

        Raises:
            RootNotFoundError: If ``root`` does not exist
        """
        root = Path(root)
        if not root.exists():
            raise RootNotFoundError(str(root))

        report = CollectionReport(root=str(root))
        self._last_report = report

        relative_paths = self.discover(root, report)
        report.discovered = len(relative_paths)

        with ThreadPoolExecutor(max_workers=self._config.max_workers,
                                thread_name_prefix="DocumentCollector") as executor:
            results = list(executor.map(lambda rel: self._load(root, rel), relative_paths))

        documents = []
        for relative, result in zip(relative_paths, results):
            if isinstance(result, Document):
                documents.append(result)
            else:
                report.skipped[relative.as_posix()] = result

        report.loaded = len(documents)
        logger.info(
            f"Collected {report.loaded} documents from {root} "
            f"({report.skipped_count} skipped, {len(report.walk_errors)} walk errors)"
        )
        return documents

    def discover(self, root: Path, report: CollectionReport | None = None) -> list[Path]:
        """Enumerate regular files under ``root`` as root-relative paths.

        Args:
            root: Directory to walk (a single file is accepted too)
            report: Optional report that collects walk errors

        Returns:
            Root-relative paths that pass the include/exclude patterns
        """
        if root.is_file():
            return [Path(root.name)] if self._matches(root.name) else []

        def on_error(error: OSError) -> None:
            logger.warning(f"Failed to walk directory entry: {error}")
            if report is not None:
                report.walk_errors.append(str(error))

        paths = []
        for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error,
                                                     followlinks=self._config.follow_symlinks):
            for name in filenames:
                full_path = Path(dirpath) / name
                # Skips dangling symlinks, sockets, fifos and the like
                if not full_path.is_file():
                    continue
                relative = full_path.relative_to(root)
                if self._matches(relative.as_posix()):
                    paths.append(relative)
        return paths

    def _matches(self, rel_path: str) -> bool:
        name = rel_path.rsplit("/", 1)[-1]

        def hit(pattern: str) -> bool:
            return fnmatch(rel_path, pattern) or fnmatch(name, pattern)

        if not any(hit(p) for p in self._config.include_patterns):
            return False
        return not any(hit(p) for p in self._config.exclude_patterns)

    def _load(self, root: Path, relative: Path) -> Document | str:
        """Load one file, returning the Document or the reason it was dropped."""
        path = root if root.is_file() else root / relative
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning(f"Failed to read file at {path}: {e}")
            return f"read error: {e}"

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Invalid UTF-8 in file {path}: {e}")
            return f"invalid utf-8: {e.reason}"

        return Document.from_text(normalize_path(relative), text, size=len(raw))


def grab_documents(root: Path | str, config: IndexingConfig | None = None) -> list[Document]:
    """Collect all readable text documents under ``root``.

    Args:
        root: Directory to walk
        config: Optional indexing configuration

    Returns:
        Loaded documents, in no particular order

    Raises:
        RootNotFoundError: If ``root`` does not exist
    """
    return DocumentCollector(config).collect(root)
