"""JSON snapshot persistence for the index."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from docseek.errors import PersistenceFailure, SnapshotCorrupt
from docseek.models import Document

LOGGER = logging.getLogger(__name__)

Documents = Dict[Path, Document]
DocumentFrequency = Dict[str, int]


def snapshot_to_dict(documents: Mapping[Path, Document], document_frequency: Mapping[str, int]) -> dict:
    return {
        "documents": {
            str(path): {
                "term_frequency": dict(document.term_frequency),
                "token_count": document.token_count,
                "last_modified": document.last_modified,
            }
            for path, document in documents.items()
        },
        "document_frequency": dict(document_frequency),
    }


def _expect(condition: bool, path: Path, message: str) -> None:
    if not condition:
        raise SnapshotCorrupt(path, message)


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _load_document(source: Path, key: str, raw: Any) -> Document:
    _expect(isinstance(raw, dict), source, f"document {key!r} is not an object")
    for name in ("term_frequency", "token_count", "last_modified"):
        _expect(name in raw, source, f"document {key!r} is missing {name!r}")

    term_frequency = raw["term_frequency"]
    _expect(isinstance(term_frequency, dict), source, f"document {key!r} has a malformed term_frequency")
    _expect(
        all(_is_count(count) and count > 0 for count in term_frequency.values()),
        source,
        f"document {key!r} has non-positive term counts",
    )
    _expect(_is_count(raw["token_count"]), source, f"document {key!r} has a malformed token_count")
    _expect(
        raw["token_count"] == sum(term_frequency.values()),
        source,
        f"document {key!r} token_count does not match its term frequencies",
    )
    last_modified = raw["last_modified"]
    _expect(
        isinstance(last_modified, (int, float)) and not isinstance(last_modified, bool),
        source,
        f"document {key!r} has a malformed last_modified",
    )
    return Document(
        term_frequency=dict(term_frequency),
        token_count=raw["token_count"],
        last_modified=float(last_modified),
    )


def snapshot_from_dict(payload: Any, source: Path) -> Tuple[Documents, DocumentFrequency]:
    """Validate and convert a decoded snapshot.

    The document frequency map must agree exactly with the documents; any
    mismatch is reported as corruption rather than repaired.
    """
    _expect(isinstance(payload, dict), source, "top level is not an object")
    _expect("documents" in payload, source, "missing 'documents'")
    _expect("document_frequency" in payload, source, "missing 'document_frequency'")
    raw_documents = payload["documents"]
    raw_frequency = payload["document_frequency"]
    _expect(isinstance(raw_documents, dict), source, "'documents' is not an object")
    _expect(isinstance(raw_frequency, dict), source, "'document_frequency' is not an object")

    documents = {Path(key): _load_document(source, key, raw) for key, raw in raw_documents.items()}
    _expect(len(documents) == len(raw_documents), source, "duplicate document paths")

    _expect(
        all(_is_count(count) for count in raw_frequency.values()),
        source,
        "'document_frequency' has malformed counts",
    )
    document_frequency = {term: count for term, count in raw_frequency.items() if count > 0}

    expected: Counter[str] = Counter()
    for document in documents.values():
        expected.update(document.term_frequency.keys())
    _expect(
        dict(expected) == document_frequency,
        source,
        "'document_frequency' does not match the indexed documents",
    )
    return documents, document_frequency


class JSONSnapshotStore:
    """Reads and writes the whole index as a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Tuple[Documents, DocumentFrequency]:
        LOGGER.info("Using index at %s", self.path)
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise SnapshotCorrupt(self.path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise SnapshotCorrupt(self.path, str(exc)) from exc
        except OSError as exc:
            raise SnapshotCorrupt(self.path, exc.strerror or str(exc)) from exc
        return snapshot_from_dict(payload, self.path)

    def save(self, documents: Mapping[Path, Document], document_frequency: Mapping[str, int]) -> None:
        """Atomically replace the snapshot file."""
        LOGGER.debug("Saving index to %s", self.path)
        payload = snapshot_to_dict(documents, document_frequency)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                suffix=".tmp", prefix=self.path.name + ".", dir=self.path.parent
            )
        except OSError as exc:
            raise PersistenceFailure(self.path, str(exc)) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False)
            os.replace(temp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise PersistenceFailure(self.path, str(exc)) from exc
        LOGGER.debug("Saved %d documents", len(documents))
