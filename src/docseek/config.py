"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from docseek.ingestion.text_loader import SUPPORTED_EXTENSIONS
from docseek.text.stemming import DEFAULT_ALGORITHM, StemmingAlgorithm

DEFAULT_INDEX_PATH = Path(".search_model.json")


@dataclass(slots=True)
class AppConfig:
    index_path: Path | None = None
    algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM
    extensions: Tuple[str, ...] = SUPPORTED_EXTENSIONS

    def __post_init__(self) -> None:
        if self.index_path is None:
            self.index_path = DEFAULT_INDEX_PATH
        self.algorithm = StemmingAlgorithm(self.algorithm)

    def resolve_index_path(self, base_dir: Path | None = None) -> Path:
        """Anchor a relative index path at ``base_dir`` when one is given."""
        path = Path(self.index_path)
        if path.is_absolute() or base_dir is None:
            return path
        return base_dir / path
