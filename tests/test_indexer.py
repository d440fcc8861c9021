"""Tests for Indexer."""

import os
from pathlib import Path
from unittest.mock import Mock

import pytest

from docseek.errors import DocumentReadError, PersistenceFailure
from docseek.index.indexer import Indexer, IndexStats, find_documents
from docseek.index.model import Model


class TestIndexStats:
    """Test IndexStats tracking."""

    def test_init_defaults(self):
        """Test default initialization."""
        stats = IndexStats()
        assert stats.inserted == 0
        assert stats.updated == 0
        assert stats.skipped == 0
        assert stats.failed == 0
        assert stats.processed_files == []

    @pytest.mark.parametrize("status", ["inserted", "updated", "skipped"])
    def test_increment_known_status(self, status):
        stats = IndexStats()
        path = Path("/tmp/test.txt")

        stats.increment(status, path)

        assert getattr(stats, status) == 1
        assert stats.failed == 0
        assert path in stats.processed_files

    def test_increment_failed(self):
        """Unknown statuses count as failures."""
        stats = IndexStats()
        stats.increment("unknown_status", Path("/tmp/test.txt"))
        assert stats.failed == 1


class TestFindDocuments:
    """find_documents helper."""

    def test_filters_by_extension(self, tmp_path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.md").write_text("b")
        assert find_documents([tmp_path]) == [tmp_path / "a.txt"]

    def test_custom_extensions(self, tmp_path):
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.md").write_text("b")
        assert find_documents([tmp_path], extensions=[".md"]) == [tmp_path / "b.md"]


class TestIndexer:
    """Test Indexer document pipeline."""

    @pytest.fixture
    def model(self):
        return Model()

    @pytest.fixture
    def docs(self, tmp_path):
        (tmp_path / "cat.txt").write_text("the cat sat on the mat")
        (tmp_path / "dog.txt").write_text("the dog sat on the log")
        return tmp_path

    def test_init(self, model):
        extractor = Mock()
        indexer = Indexer(model, extractor=extractor, extensions=[".md"])

        assert indexer.model is model
        assert indexer.extractor is extractor
        assert indexer.extensions == (".md",)

    def test_index_directory(self, model, docs):
        stats = Indexer(model).index([docs])

        assert stats.inserted == 2
        assert stats.failed == 0
        assert set(model.documents) == {docs / "cat.txt", docs / "dog.txt"}
        assert model.document_frequency["sat"] == 2

    def test_unchanged_files_are_skipped(self, model, docs):
        indexer = Indexer(model)
        indexer.index([docs])

        stats = indexer.index([docs])

        assert stats.skipped == 2
        assert stats.inserted == 0

    def test_force_reindexes(self, model, docs):
        indexer = Indexer(model)
        indexer.index([docs])

        stats = indexer.index([docs], force=True)

        assert stats.updated == 2
        assert model.document_frequency["sat"] == 2

    def test_modified_file_is_updated(self, model, docs):
        indexer = Indexer(model)
        indexer.index([docs])
        cat = docs / "cat.txt"
        cat.write_text("a bird")
        future = model.documents[cat].last_modified + 60
        os.utime(cat, (future, future))

        stats = indexer.index([docs])

        assert stats.updated == 1
        assert stats.skipped == 1
        assert "bird" in model.documents[cat].term_frequency

    def test_extraction_failure_leaves_model_untouched(self, model, docs):
        def extractor(path):
            if path.name == "dog.txt":
                raise DocumentReadError(path, "permission denied")
            return path.read_text()

        stats = Indexer(model, extractor=extractor).index([docs])

        assert stats.inserted == 1
        assert stats.failed == 1
        assert docs / "dog.txt" not in model.documents
        assert "dog" not in model.document_frequency

    def test_file_vanishing_mid_run_counts_as_failure(self, model, tmp_path):
        (tmp_path / "a.txt").write_text("first file")
        (tmp_path / "b.txt").write_text("second file")

        def extractor(path):
            (tmp_path / "b.txt").unlink()
            return path.read_text()

        stats = Indexer(model, extractor=extractor).index([tmp_path])

        assert stats.inserted == 1
        assert stats.failed == 1
        assert list(model.documents) == [tmp_path / "a.txt"]

    def test_missing_path_counts_as_failure(self, model, tmp_path):
        stats = Indexer(model).index([tmp_path / "missing.txt"])
        assert stats.failed == 1
        assert model.documents == {}

    def test_no_documents(self, model, tmp_path):
        stats = Indexer(model).index([tmp_path])
        assert stats == IndexStats()

    def test_persistence_failure_propagates(self, docs):
        store = Mock()
        store.save.side_effect = PersistenceFailure(Path("index.json"), "disk full")
        model = Model(store=store)

        with pytest.raises(PersistenceFailure):
            Indexer(model).index([docs / "cat.txt"])
