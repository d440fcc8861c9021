"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Sequence

from docseek.ingestion.text_loader import SUPPORTED_EXTENSIONS


def iter_document_paths(
    inputs: Iterable[Path], extensions: Sequence[str] = SUPPORTED_EXTENSIONS
) -> Iterator[Path]:
    """Yield indexable paths from input paths, descending into directories."""
    suffixes = {extension.lower() for extension in extensions}
    for item in inputs:
        if item.is_dir():
            children = sorted(child for child in item.rglob("*") if child.is_file())
            yield from iter_document_paths(children, extensions)
        elif item.is_file() and item.suffix.lower() in suffixes:
            yield item
