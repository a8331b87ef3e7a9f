"""
LexDesk - Health Check Routes
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from lexdesk import __version__
from lexdesk.core.config import settings
from lexdesk.storage import get_document_store


router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    environment: str
    documents: int
    llm_provider: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        environment=settings.APP_ENV,
        documents=get_document_store().count(),
        llm_provider=settings.DEFAULT_LLM_PROVIDER,
    )
