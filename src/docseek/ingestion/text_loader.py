"""Plain-text extraction."""

from __future__ import annotations

import logging
from pathlib import Path

from docseek.errors import DocumentNotFound, DocumentReadError, UnsupportedFormat

LOGGER = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt",)


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def extract_text(path: Path) -> str:
    """Return the text content of ``path``.

    Undecodable bytes are replaced rather than rejected, so any readable
    ``.txt`` file yields some text.
    """
    path = Path(path)
    if not is_supported(path):
        raise UnsupportedFormat(path, f"unsupported file extension {path.suffix or '(none)'!r}")
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise DocumentNotFound(path, "file not found") from exc
    except OSError as exc:
        LOGGER.debug("Read failure for %s: %s", path, exc)
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
