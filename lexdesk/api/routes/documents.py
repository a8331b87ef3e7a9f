"""
LexDesk - Documents API Routes
"""

from __future__ import annotations

from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from lexdesk.core.types import (
    Document,
    DocumentCategory,
    DocumentUpdate,
    DocumentValidationReport,
)
from lexdesk.ingestion import validate_document_content
from lexdesk.storage import get_document_store


router = APIRouter()


class DocumentCreateRequest(BaseModel):
    """Request schema for adding a document."""
    name: str = Field(..., min_length=1, max_length=255)
    case_id: str = Field(..., min_length=1)
    category: DocumentCategory
    content: str


class DocumentCreateResponse(BaseModel):
    """Response schema for adding a document."""
    document: Document
    validation: DocumentValidationReport


class DocumentListResponse(BaseModel):
    """Response schema for listing documents."""
    documents: list[Document]
    total: int


class ValidateContentRequest(BaseModel):
    content: str


@router.get("/documents", response_model=DocumentListResponse)
async def list_documents(case_id: Optional[str] = Query(None)):
    """List documents, newest first."""
    documents = get_document_store().list(case_id=case_id)
    return DocumentListResponse(documents=documents, total=len(documents))


@router.post("/documents", response_model=DocumentCreateResponse, status_code=201)
async def create_document(request: DocumentCreateRequest):
    """Add a document. Validation problems are reported, not rejected."""
    validation = validate_document_content(request.content)
    document = get_document_store().add(Document(
        id=f"doc-{uuid4().hex[:12]}",
        name=request.name,
        case_id=request.case_id,
        category=request.category,
        content=request.content,
    ))
    return DocumentCreateResponse(document=document, validation=validation)


@router.post("/documents/validate", response_model=DocumentValidationReport)
async def validate_document(request: ValidateContentRequest):
    """Check document text without storing it."""
    return validate_document_content(request.content)


@router.get("/documents/{document_id}", response_model=Document)
async def get_document(document_id: str):
    """Get document details."""
    return get_document_store().get(document_id)


@router.put("/documents/{document_id}", response_model=Document)
async def update_document(document_id: str, changes: DocumentUpdate):
    """Update a document's name, case, category or content."""
    return get_document_store().update(document_id, changes)


@router.delete("/documents/{document_id}", status_code=204)
async def delete_document(document_id: str):
    """Delete a document."""
    get_document_store().delete(document_id)
