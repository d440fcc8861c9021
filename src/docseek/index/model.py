"""In-memory full-text index with write-through persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from docseek.index.search import SearchResult, rank
from docseek.index.storage import JSONSnapshotStore
from docseek.models import Document
from docseek.text.stemming import DEFAULT_ALGORITHM, StemmingAlgorithm, analyze

LOGGER = logging.getLogger(__name__)


class Model:
    """Term statistics for a corpus of documents.

    ``documents`` maps each indexed path to its term counts and
    ``document_frequency`` maps each term to the number of documents that
    contain it. Both maps are only mutated through :meth:`add` and
    :meth:`remove`, which keep them consistent. When a store is attached,
    every successful mutation rewrites the snapshot.
    """

    def __init__(
        self,
        *,
        algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM,
        store: Optional[JSONSnapshotStore] = None,
        documents: Optional[Dict[Path, Document]] = None,
        document_frequency: Optional[Dict[str, int]] = None,
    ) -> None:
        self.algorithm = algorithm
        self.store = store
        self.documents: Dict[Path, Document] = documents if documents is not None else {}
        self.document_frequency: Dict[str, int] = (
            document_frequency if document_frequency is not None else {}
        )

    @classmethod
    def open(
        cls, store: JSONSnapshotStore, *, algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM
    ) -> Model:
        """Load the index persisted in ``store``, or start empty if there is none."""
        if not store.exists():
            LOGGER.info("No index at %s, starting empty", store.path)
            return cls(algorithm=algorithm, store=store)
        documents, document_frequency = store.load()
        return cls(
            algorithm=algorithm,
            store=store,
            documents=documents,
            document_frequency=document_frequency,
        )

    @property
    def total_documents(self) -> int:
        return len(self.documents)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, Path)) and Path(path) in self.documents

    def analyze(self, text: str) -> List[str]:
        return list(analyze(text, self.algorithm))

    def save(self) -> None:
        if self.store is not None:
            self.store.save(self.documents, self.document_frequency)

    def add(self, path: Path | str, text: str) -> str:
        """Index ``text`` under ``path``, replacing any previous version.

        Returns ``"inserted"`` for a new path and ``"updated"`` otherwise.
        """
        path = Path(path)
        document = Document.from_terms(self.analyze(text))

        previous = self.documents.pop(path, None)
        if previous is not None:
            self._unindex(previous)
        self.documents[path] = document
        for term in document.term_frequency:
            self.document_frequency[term] = self.document_frequency.get(term, 0) + 1

        LOGGER.debug(
            "Indexed %s: %d tokens, %d terms",
            path,
            document.token_count,
            len(document.term_frequency),
        )
        self.save()
        return "inserted" if previous is None else "updated"

    def remove(self, path: Path | str) -> bool:
        """Drop ``path`` from the index. Unknown paths are ignored."""
        document = self.documents.pop(Path(path), None)
        if document is None:
            return False
        self._unindex(document)
        LOGGER.debug("Removed %s", path)
        self.save()
        return True

    def prune_missing(self) -> int:
        """Remove documents whose files no longer exist on disk."""
        missing = [path for path in self.documents if not path.exists()]
        for path in missing:
            self._unindex(self.documents.pop(path))
        if missing:
            self.save()
        return len(missing)

    def is_stale(self, path: Path | str, mtime: float) -> bool:
        """Whether a file modified at ``mtime`` needs (re)indexing."""
        document = self.documents.get(Path(path))
        return document is None or mtime > document.last_modified

    def query(self, text: str, *, top_k: Optional[int] = None) -> List[SearchResult]:
        return rank(self.documents, self.document_frequency, self.analyze(text), top_k=top_k)

    def _unindex(self, document: Document) -> None:
        for term in document.term_frequency:
            remaining = self.document_frequency.get(term, 0) - 1
            if remaining > 0:
                self.document_frequency[term] = remaining
            else:
                self.document_frequency.pop(term, None)
