"""
LexDesk - Storage Module
"""

from lexdesk.storage.document import (
    InMemoryDocumentStore,
    sample_documents,
    get_document_store,
    reset_document_store,
)

__all__ = [
    "InMemoryDocumentStore",
    "sample_documents",
    "get_document_store",
    "reset_document_store",
]
