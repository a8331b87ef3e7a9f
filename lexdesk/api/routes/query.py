"""
LexDesk - Query API Routes
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from fastapi import APIRouter

from lexdesk.core.logging import get_logger
from lexdesk.core.types import DocumentCategory, RankingPreset
from lexdesk.api.services.qa_pipeline import get_qa_pipeline


router = APIRouter()
logger = get_logger(__name__)


# =============================================================================
# Request/Response Schemas
# =============================================================================

class QueryRequest(BaseModel):
    """Request schema for query and search endpoints."""
    query: str = Field(..., min_length=1, max_length=10000, description="The user's question")
    case_id: Optional[str] = Field(None, description="Restrict retrieval to one case")
    preset: Optional[RankingPreset] = Field(None, description="Override the ranking preset")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "query": "How much raw material must the seller supply?",
                    "preset": "enhanced",
                }
            ]
        }
    }


class SourceReference(BaseModel):
    """A ranked source document."""
    id: str
    name: str
    case_id: str
    category: DocumentCategory
    upload_date: datetime
    relevance_score: Optional[float] = None
    excerpt: str


class QueryResponse(BaseModel):
    """Response schema for query endpoint."""
    query_id: str
    query: str
    answer: str
    sources: list[SourceReference] = Field(default_factory=list)
    generated: bool
    latency_ms: float


class SearchResponse(BaseModel):
    """Response schema for search endpoint."""
    query: str
    results: list[SourceReference] = Field(default_factory=list)


def _excerpt(content: str, limit: int = 200) -> str:
    return content[:limit] + "..." if len(content) > limit else content


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/query", response_model=QueryResponse)
async def query(request: QueryRequest):
    """
    Answer a question from the stored case documents.

    1. Lexical ranking of the documents
    2. Context assembly
    3. Answer generation

    The ranked sources are returned even when generation fails.
    """
    pipeline = get_qa_pipeline()

    result = await pipeline.answer(
        question=request.query,
        case_id=request.case_id,
        preset=request.preset,
    )

    scores = result.scores or [None] * len(result.sources)
    sources = [
        SourceReference(
            id=doc.id,
            name=doc.name,
            case_id=doc.case_id,
            category=doc.category,
            upload_date=doc.upload_date,
            relevance_score=score,
            excerpt=_excerpt(doc.content),
        )
        for doc, score in zip(result.sources, scores)
    ]

    return QueryResponse(
        query_id=result.query_id,
        query=result.query,
        answer=result.answer,
        sources=sources,
        generated=result.generated,
        latency_ms=result.latency_ms,
    )


@router.post("/search", response_model=SearchResponse)
async def search(request: QueryRequest):
    """Rank the stored documents for a query without generating an answer."""
    pipeline = get_qa_pipeline()

    ranked = pipeline.search(
        request.query,
        case_id=request.case_id,
        preset=request.preset,
    )

    logger.info("Search complete", results=len(ranked))

    return SearchResponse(
        query=request.query,
        results=[
            SourceReference(
                id=s.document.id,
                name=s.document.name,
                case_id=s.document.case_id,
                category=s.document.category,
                upload_date=s.document.upload_date,
                relevance_score=round(s.score, 4),
                excerpt=_excerpt(s.document.content),
            )
            for s in ranked
        ],
    )
