"""
Tests for lexdesk/storage/document/
"""

from unittest.mock import patch

import pytest

from lexdesk.core.exceptions import DocumentNotFoundError, DuplicateDocumentError
from lexdesk.core.types import DocumentCategory, DocumentUpdate
from lexdesk.storage.document.repository import InMemoryDocumentStore


class TestInMemoryDocumentStore:
    """Tests for the in-memory document store."""

    def test_empty_store(self):
        """Test that a new store is empty."""
        store = InMemoryDocumentStore()
        assert store.count() == 0
        assert store.list() == []

    def test_add_puts_newest_first(self, make_document):
        """Test that added documents are listed first."""
        first = make_document(id="doc-a")
        second = make_document(id="doc-b")
        store = InMemoryDocumentStore()

        store.add(first)
        store.add(second)

        assert [d.id for d in store.list()] == ["doc-b", "doc-a"]

    def test_add_duplicate_raises(self, make_document):
        """Test that ids must be unique."""
        store = InMemoryDocumentStore([make_document(id="doc-a")])

        with pytest.raises(DuplicateDocumentError):
            store.add(make_document(id="doc-a"))

    def test_get(self, document_store):
        """Test fetching a document by id."""
        assert document_store.get("doc-3").name == "Land_Sale_Agreement.pdf"

    def test_get_missing_raises(self, document_store):
        """Test that unknown ids raise DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError) as exc_info:
            document_store.get("doc-404")

        assert exc_info.value.code == "DOCUMENT_NOT_FOUND"

    def test_list_by_case(self, document_store):
        """Test filtering by case id."""
        assert [d.id for d in document_store.list(case_id="case-1")] == ["doc-1", "doc-2"]
        assert document_store.list(case_id="case-9") == []

    def test_list_is_snapshot(self, document_store):
        """Test that mutating the listed sequence leaves the store alone."""
        listed = document_store.list()
        listed.clear()
        assert document_store.count() == 3

    def test_update(self, document_store):
        """Test a partial update keeps untouched fields."""
        original = document_store.get("doc-1")

        updated = document_store.update(
            "doc-1",
            DocumentUpdate(name="Supply_Agreement_v3.pdf", category=DocumentCategory.CORRESPONDENCE),
        )

        assert updated.name == "Supply_Agreement_v3.pdf"
        assert updated.category == DocumentCategory.CORRESPONDENCE
        assert updated.content == original.content
        assert updated.upload_date == original.upload_date
        assert document_store.get("doc-1") == updated
        assert document_store.list()[0].id == "doc-1"

    def test_update_missing_raises(self, document_store):
        """Test that updating an unknown id raises."""
        with pytest.raises(DocumentNotFoundError):
            document_store.update("doc-404", DocumentUpdate(name="x.pdf"))

    def test_delete(self, document_store):
        """Test removing a document."""
        document_store.delete("doc-2")

        assert document_store.count() == 2
        with pytest.raises(DocumentNotFoundError):
            document_store.get("doc-2")

    def test_delete_missing_raises(self, document_store):
        """Test that deleting an unknown id raises."""
        with pytest.raises(DocumentNotFoundError):
            document_store.delete("doc-404")

    def test_clear(self, document_store):
        """Test clearing the store."""
        document_store.clear()
        assert document_store.count() == 0


class TestDocumentStoreSingleton:
    """Tests for the global document store."""

    def test_seeded_with_samples(self):
        """Test that the global store is seeded when configured."""
        from lexdesk.storage import document as module

        module.reset_document_store()
        with patch.object(module.settings, "SEED_SAMPLE_DOCUMENTS", True):
            store = module.get_document_store()
            assert store.count() == 3
            assert module.get_document_store() is store
        module.reset_document_store()

    def test_unseeded(self):
        """Test that seeding can be switched off."""
        from lexdesk.storage import document as module

        module.reset_document_store()
        with patch.object(module.settings, "SEED_SAMPLE_DOCUMENTS", False):
            assert module.get_document_store().count() == 0
        module.reset_document_store()


class TestSampleDocuments:
    """Tests for the seed documents."""

    def test_sample_documents(self, sample_documents):
        """Test the seed documents cover two cases."""
        assert [d.id for d in sample_documents] == ["doc-1", "doc-2", "doc-3"]
        assert {d.case_id for d in sample_documents} == {"case-1", "case-2"}
        assert "500 tons of raw material" in sample_documents[0].content
