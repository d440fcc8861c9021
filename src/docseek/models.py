"""Core DocSeek data models."""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable


@dataclass(slots=True)
class Document:
    """Term statistics of one indexed file."""

    term_frequency: Dict[str, int] = field(default_factory=dict)
    token_count: int = 0
    last_modified: float = field(default_factory=time.time)

    @classmethod
    def from_terms(cls, terms: Iterable[str]) -> Document:
        """Count ``terms`` into a new document stamped with the current time."""
        counts = Counter(terms)
        return cls(term_frequency=dict(counts), token_count=sum(counts.values()))

    def count(self, term: str) -> int:
        return self.term_frequency.get(term, 0)
