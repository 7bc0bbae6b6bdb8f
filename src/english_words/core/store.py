# src/english_words/core/store.py
"""
Document storage for the word list.

A store only knows how to read, overwrite and create a named document.
Appending is a plain read-then-write with no locking, so two concurrent
appends to the same document can lose one of the blocks.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import redis


logger = logging.getLogger(__name__)

DOCUMENT_HEADING = "# English Words\n"


class DocumentStore(ABC):
    @abstractmethod
    def read(self, path: str) -> str | None:
        """Document text, or None if there is no such document."""
        pass

    @abstractmethod
    def write(self, path: str, text: str) -> None:
        """Overwrite an existing document."""
        pass

    @abstractmethod
    def create(self, path: str, text: str) -> None:
        """Create a new document."""
        pass


class FileDocumentStore(DocumentStore):
    """Documents are UTF-8 files under a root directory."""

    def __init__(self, root: str | Path = "."):
        self.root = Path(root)

    def _file(self, path: str) -> Path:
        return self.root / path

    def read(self, path: str) -> str | None:
        file = self._file(path)
        if not file.is_file():
            return None
        return file.read_text(encoding="utf-8")

    def write(self, path: str, text: str) -> None:
        self._file(path).write_text(text, encoding="utf-8")

    def create(self, path: str, text: str) -> None:
        file = self._file(path)
        file.parent.mkdir(parents=True, exist_ok=True)
        with open(file, "x", encoding="utf-8") as f:
            f.write(text)


class RedisDocumentStore(DocumentStore):
    """Documents are Redis string keys."""

    def __init__(self, client: redis.Redis, prefix: str = "words"):
        self.client = client
        self.prefix = prefix

    def _doc_key(self, path: str) -> str:
        return f"{self.prefix}:doc:{path}"

    def read(self, path: str) -> str | None:
        data = self.client.get(self._doc_key(path))
        if data is None:
            return None
        return data.decode("utf-8")

    def write(self, path: str, text: str) -> None:
        self.client.set(self._doc_key(path), text.encode("utf-8"))

    def create(self, path: str, text: str) -> None:
        if not self.client.set(self._doc_key(path), text.encode("utf-8"), nx=True):
            raise FileExistsError(f"Document already exists: {path}")


def append_to_document(store: DocumentStore, path: str, block: str) -> None:
    existing = store.read(path)
    if existing is None:
        logger.info("Creating %s", path)
        store.create(path, DOCUMENT_HEADING + block)
    else:
        logger.debug("Appending %d chars to %s", len(block), path)
        store.write(path, existing + block)
