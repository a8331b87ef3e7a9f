"""
LexDesk - Document Storage Module
"""

from typing import Optional

from lexdesk.core.config import settings
from lexdesk.storage.document.repository import InMemoryDocumentStore
from lexdesk.storage.document.samples import sample_documents


# Singleton instance
_store: Optional[InMemoryDocumentStore] = None


def get_document_store() -> InMemoryDocumentStore:
    """Get the global document store, seeded on first use when configured."""
    global _store
    if _store is None:
        seed = sample_documents() if settings.SEED_SAMPLE_DOCUMENTS else []
        _store = InMemoryDocumentStore(seed)
    return _store


def reset_document_store() -> None:
    """Drop the global document store. Used in testing."""
    global _store
    _store = None


__all__ = [
    "InMemoryDocumentStore",
    "sample_documents",
    "get_document_store",
    "reset_document_store",
]
