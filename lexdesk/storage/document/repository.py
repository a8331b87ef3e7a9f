"""
LexDesk - In-Memory Document Store
"""

from __future__ import annotations

from typing import Iterable, Optional

from lexdesk.core.exceptions import DocumentNotFoundError, DuplicateDocumentError
from lexdesk.core.logging import LoggerMixin
from lexdesk.core.types import Document, DocumentUpdate


class InMemoryDocumentStore(LoggerMixin):
    """
    Memory-resident document collection.

    Documents are listed newest first. Contents are lost on restart.
    """

    def __init__(self, documents: Optional[Iterable[Document]] = None):
        self._documents: list[Document] = list(documents or [])

    def add(self, document: Document) -> Document:
        """Add a document at the head of the collection."""
        if self._find(document.id) is not None:
            raise DuplicateDocumentError(document.id)
        self._documents.insert(0, document)
        self.logger.debug("Added document", document_id=document.id, case_id=document.case_id)
        return document

    def get(self, document_id: str) -> Document:
        """Get a document by id."""
        index = self._find(document_id)
        if index is None:
            raise DocumentNotFoundError(document_id)
        return self._documents[index]

    def update(self, document_id: str, changes: DocumentUpdate) -> Document:
        """Apply a partial update and return the new document."""
        index = self._find(document_id)
        if index is None:
            raise DocumentNotFoundError(document_id)
        updated = self._documents[index].model_copy(
            update=changes.model_dump(exclude_none=True)
        )
        self._documents[index] = updated
        self.logger.debug("Updated document", document_id=document_id)
        return updated

    def delete(self, document_id: str) -> None:
        """Remove a document."""
        index = self._find(document_id)
        if index is None:
            raise DocumentNotFoundError(document_id)
        del self._documents[index]
        self.logger.debug("Deleted document", document_id=document_id)

    def list(self, case_id: Optional[str] = None) -> list[Document]:
        """Snapshot of the documents, optionally restricted to one case."""
        if case_id is None:
            return list(self._documents)
        return [doc for doc in self._documents if doc.case_id == case_id]

    def count(self) -> int:
        return len(self._documents)

    def clear(self) -> None:
        self._documents.clear()

    def _find(self, document_id: str) -> Optional[int]:
        for index, doc in enumerate(self._documents):
            if doc.id == document_id:
                return index
        return None
