"""Tests for ranking."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from docseek.index.search import (
    SearchResult,
    inverse_document_frequency,
    rank,
    term_frequency,
)
from docseek.models import Document


def doc(*terms: str) -> Document:
    return Document.from_terms(terms)


class TestSearchResult:
    """SearchResult is a (score, path) pair."""

    def test_unpacks_as_pair(self) -> None:
        score, path = SearchResult(0.5, Path("/a.txt"))
        assert score == 0.5
        assert path == Path("/a.txt")

    def test_equals_tuple(self) -> None:
        assert SearchResult(1.0, Path("a")) == (1.0, Path("a"))


class TestTermFrequency:
    """tf computation."""

    def test_share_of_tokens(self) -> None:
        assert term_frequency("cat", doc("the", "cat", "the", "mat")) == 0.25

    def test_absent_term(self) -> None:
        assert term_frequency("dog", doc("cat")) == 0.0

    def test_empty_document(self) -> None:
        """No division by zero for documents without tokens."""
        assert term_frequency("cat", Document()) == 0.0


class TestInverseDocumentFrequency:
    """idf computation."""

    def test_log_ratio(self) -> None:
        assert inverse_document_frequency("cat", {"cat": 1}, 10) == pytest.approx(1.0)

    def test_term_in_every_document(self) -> None:
        assert inverse_document_frequency("the", {"the": 4}, 4) == 0.0

    def test_unseen_term(self) -> None:
        assert inverse_document_frequency("unicorn", {"cat": 1}, 3) == 0.0

    def test_zero_frequency_entry(self) -> None:
        assert inverse_document_frequency("cat", {"cat": 0}, 3) == 0.0


class TestRank:
    """rank() over documents."""

    @pytest.fixture
    def corpus(self) -> tuple[dict[Path, Document], dict[str, int]]:
        documents = {
            Path("a.txt"): doc("cat", "sat", "mat"),
            Path("b.txt"): doc("dog", "dog", "dog", "log"),
            Path("c.txt"): doc("cat", "dog"),
        }
        frequency = {"cat": 2, "sat": 1, "mat": 1, "dog": 2, "log": 1}
        return documents, frequency

    def test_additive_score(self, corpus) -> None:
        """Score is tf plus idf, summed over query terms."""
        documents, frequency = corpus
        results = rank(documents, frequency, ["mat"])

        assert results == [(pytest.approx(1 / 3 + math.log10(3)), Path("a.txt"))]

    def test_orders_by_descending_score(self, corpus) -> None:
        documents, frequency = corpus
        results = rank(documents, frequency, ["dog"])

        assert [result.path for result in results] == [Path("b.txt"), Path("c.txt")]
        assert results[0].score > results[1].score

    def test_documents_without_matches_excluded(self, corpus) -> None:
        documents, frequency = corpus
        paths = [result.path for result in rank(documents, frequency, ["log"])]
        assert paths == [Path("b.txt")]

    def test_repeated_query_terms_count_twice(self, corpus) -> None:
        documents, frequency = corpus
        single = rank(documents, frequency, ["mat"])[0].score
        double = rank(documents, frequency, ["mat", "mat"])[0].score
        assert double == pytest.approx(2 * single)

    def test_ties_ordered_by_path(self) -> None:
        documents = {Path("z.txt"): doc("cat", "x"), Path("m.txt"): doc("cat", "y")}
        results = rank(documents, {"cat": 2, "x": 1, "y": 1}, ["cat"])
        assert [result.path for result in results] == [Path("m.txt"), Path("z.txt")]

    def test_top_k(self, corpus) -> None:
        documents, frequency = corpus
        results = rank(documents, frequency, ["cat", "dog"], top_k=1)
        assert len(results) == 1
        assert results[0].path == Path("c.txt")

    def test_empty_query(self, corpus) -> None:
        documents, frequency = corpus
        assert rank(documents, frequency, []) == []

    def test_unmatched_query(self, corpus) -> None:
        documents, frequency = corpus
        assert rank(documents, frequency, ["unicorn"]) == []

    def test_empty_index(self) -> None:
        assert rank({}, {}, ["cat"]) == []

    def test_empty_document_never_matches(self) -> None:
        documents = {Path("empty.txt"): Document(), Path("a.txt"): doc("cat")}
        results = rank(documents, {"cat": 1}, ["cat"])
        assert [result.path for result in results] == [Path("a.txt")]
