"""ChunkSift test package."""

# Test utilities
from pathlib import Path


def create_test_file(directory: Path, filename: str, content: str | bytes) -> Path:
    """Create a test file (and its parent directories) with given content."""
    file_path = directory / filename
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        file_path.write_bytes(content)
    else:
        file_path.write_bytes(content.encode("utf-8"))
    return file_path


class FakeEmbeddingProvider:
    """Deterministic embedder: letter frequencies over a-z."""

    name = "fake"
    dims = 26

    def __init__(self):
        self.calls: list[list[str]] = []

    def embed(self, texts):
        self.calls.append(list(texts))
        vectors = []
        for text in texts:
            vector = [0.0] * self.dims
            for ch in text.lower():
                if "a" <= ch <= "z":
                    vector[ord(ch) - ord("a")] += 1.0
            vectors.append(vector)
        return vectors
