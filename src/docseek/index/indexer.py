"""Document indexing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from docseek.errors import DocumentNotFound, DocumentReadError, ExtractionError
from docseek.index.model import Model
from docseek.ingestion.text_loader import SUPPORTED_EXTENSIONS, extract_text
from docseek.utils.files import iter_document_paths

LOGGER = logging.getLogger(__name__)

OUTCOMES = ("inserted", "updated", "skipped")


def find_documents(
    paths: Sequence[Path], extensions: Sequence[str] = SUPPORTED_EXTENSIONS
) -> list[Path]:
    """Find all indexable files under the given paths."""
    return list(iter_document_paths(paths, extensions))


@dataclass(slots=True)
class IndexStats:
    """Per-file outcomes of one indexing run."""

    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    processed_files: list[Path] = field(default_factory=list)

    def increment(self, status: str, path: Path) -> None:
        """Record ``path`` under ``status``; unknown outcomes are failures."""
        outcome = status if status in OUTCOMES else "failed"
        setattr(self, outcome, getattr(self, outcome) + 1)
        self.processed_files.append(path)


def _modified_time(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except FileNotFoundError as exc:
        raise DocumentNotFound(path, "file disappeared before indexing") from exc
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc


class Indexer:
    """Feeds files through extraction into the model."""

    def __init__(
        self,
        model: Model,
        *,
        extractor: Callable[[Path], str] = extract_text,
        extensions: Sequence[str] = SUPPORTED_EXTENSIONS,
    ) -> None:
        self.model = model
        self.extractor = extractor
        self.extensions = tuple(extensions)

    def index(self, paths: Sequence[Path], *, force: bool = False) -> IndexStats:
        """Index every supported file found under ``paths``.

        Unchanged files are skipped unless ``force`` is set. A file that
        cannot be read is logged and counted as failed; persistence failures
        propagate.
        """
        stats = IndexStats()
        existing = []
        for path in paths:
            if path.exists():
                existing.append(path)
            else:
                LOGGER.error("Path not found: %s", path)
                stats.increment("failed", path)

        files = find_documents(existing, self.extensions)
        if not files:
            LOGGER.warning("No documents found")
            return stats

        for path in files:
            try:
                status = self._index_single(path, force=force)
            except ExtractionError as exc:
                LOGGER.error("Failed to process %s: %s", path, exc)
                status = "failed"
            stats.increment(status, path)
        return stats

    def _index_single(self, path: Path, *, force: bool) -> str:
        if not force and not self.model.is_stale(path, _modified_time(path)):
            LOGGER.debug("Unchanged since last indexed: %s", path)
            return "skipped"

        LOGGER.info("Processing: %s", path)
        text = self.extractor(path)
        return self.model.add(path, text)
