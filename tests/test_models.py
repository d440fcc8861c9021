"""Tests for core data models."""

from __future__ import annotations

import time

from docseek.models import Document


class TestDocument:
    """Test Document dataclass."""

    def test_defaults(self) -> None:
        """An empty document has no terms and a current timestamp."""
        before = time.time()
        document = Document()

        assert document.term_frequency == {}
        assert document.token_count == 0
        assert before <= document.last_modified <= time.time()

    def test_from_terms_counts_occurrences(self) -> None:
        """Should count every term and total the tokens."""
        document = Document.from_terms(["the", "cat", "the"])

        assert document.term_frequency == {"the": 2, "cat": 1}
        assert document.token_count == 3

    def test_token_count_matches_frequencies(self) -> None:
        document = Document.from_terms(["a", "b", "b", "c", "c", "c"])
        assert document.token_count == sum(document.term_frequency.values())

    def test_count_missing_term(self) -> None:
        document = Document.from_terms(["cat"])
        assert document.count("cat") == 1
        assert document.count("dog") == 0

    def test_equality(self) -> None:
        """Should compare documents by value."""
        first = Document(term_frequency={"a": 1}, token_count=1, last_modified=10.0)
        second = Document(term_frequency={"a": 1}, token_count=1, last_modified=10.0)
        assert first == second
