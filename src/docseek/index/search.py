"""Ranking of indexed documents against query terms."""

from __future__ import annotations

import math
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Mapping, NamedTuple, Optional

import numpy as np

from docseek.models import Document


class SearchResult(NamedTuple):
    score: float
    path: Path


def term_frequency(term: str, document: Document) -> float:
    """Share of the document's tokens that are ``term``; 0 for empty documents."""
    if document.token_count == 0:
        return 0.0
    return document.count(term) / document.token_count


def inverse_document_frequency(
    term: str, document_frequency: Mapping[str, int], total_documents: int
) -> float:
    """``log10(N / df)``, or 0 for terms no document contains."""
    frequency = document_frequency.get(term, 0)
    if frequency <= 0 or total_documents <= 0:
        return 0.0
    return math.log10(total_documents / frequency)


def rank(
    documents: Mapping[Path, Document],
    document_frequency: Mapping[str, int],
    terms: Iterable[str],
    *,
    top_k: Optional[int] = None,
) -> List[SearchResult]:
    """Score every document against the query ``terms``.

    Each occurrence of a query term adds ``tf + idf`` to the score of the
    documents containing it. The two are summed, not multiplied. Documents
    scoring zero are dropped and the rest are returned best first, ties
    ordered by path.
    """
    query = Counter(terms)
    if not query or not documents:
        return []

    paths = sorted(documents, key=str)
    token_counts = np.array([documents[path].token_count for path in paths], dtype="float64")
    scores = np.zeros(len(paths), dtype="float64")
    total = len(paths)

    for term, repeats in query.items():
        counts = np.array([documents[path].count(term) for path in paths], dtype="float64")
        if not counts.any():
            continue
        tf = np.divide(counts, token_counts, out=np.zeros_like(counts), where=token_counts > 0)
        idf = inverse_document_frequency(term, document_frequency, total)
        scores += np.where(counts > 0, tf + idf, 0.0) * repeats

    order = np.argsort(-scores, kind="stable")
    results = [SearchResult(float(scores[idx]), paths[idx]) for idx in order if scores[idx] > 0]
    if top_k is not None:
        results = results[: max(top_k, 0)]
    return results
