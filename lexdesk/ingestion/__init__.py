"""
LexDesk - Ingestion Module
"""

from lexdesk.ingestion.validation import validate_document_content

__all__ = ["validate_document_content"]
