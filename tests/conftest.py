"""
LexDesk - Test Configuration and Fixtures
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from lexdesk.core.types import Document, DocumentCategory
from lexdesk.generation.answer import AnswerGenerator, GeneratedAnswer


# =============================================================================
# Core Fixtures
# =============================================================================

@pytest.fixture
def sample_query() -> str:
    """Sample user query."""
    return "raw material supply"


@pytest.fixture
def sample_documents() -> list[Document]:
    """The seeded case documents."""
    from lexdesk.storage.document.samples import sample_documents
    return sample_documents()


@pytest.fixture
def make_document():
    """Factory for documents with sensible defaults."""
    counter = {"n": 0}

    def _make(
        content: str = "General correspondence regarding the matter",
        name: str = "letter.pdf",
        category: DocumentCategory = DocumentCategory.CORRESPONDENCE,
        case_id: str = "case-1",
        id: str | None = None,
    ) -> Document:
        counter["n"] += 1
        return Document(
            id=id or f"doc-test-{counter['n']}",
            name=name,
            case_id=case_id,
            category=category,
            content=content,
            upload_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def long_document_content() -> str:
    """Document text comfortably above the validation minimums."""
    return (
        "This Supply Agreement is made between Kampala Industries Ltd. and Global "
        "Supplies Inc. The Seller agrees to supply five hundred tons of raw material "
        "per month for a period of three years, with payment due within thirty days "
        "of each delivery."
    )


@pytest.fixture(autouse=True)
def fresh_ranking_overrides():
    """Re-read configs/ranking.yaml in every test."""
    from lexdesk.retrieval.ranking import load_ranking_overrides

    load_ranking_overrides.cache_clear()
    yield
    load_ranking_overrides.cache_clear()


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_answer_generator() -> MagicMock:
    """Mock answer generator returning a fixed answer."""
    generator = MagicMock(spec=AnswerGenerator)
    generator.generate = AsyncMock(return_value=GeneratedAnswer(
        answer="The Seller must supply 500 tons per month. (Source: Supply_Agreement_v2.pdf)",
        model="test-model",
        tokens_used=42,
    ))
    return generator


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """Mock LLM client."""
    from lexdesk.generation.llm.base import LLMResponse

    client = MagicMock()
    client.generate = AsyncMock(return_value=LLMResponse(
        content="This is a generated response based on the context.",
        model="test-model",
        input_tokens=100,
        output_tokens=50,
        total_tokens=150,
        finish_reason="end_turn",
    ))
    return client


# =============================================================================
# Store / Pipeline Fixtures
# =============================================================================

@pytest.fixture
def document_store(sample_documents):
    """Document store seeded with the sample documents."""
    from lexdesk.storage.document.repository import InMemoryDocumentStore
    return InMemoryDocumentStore(sample_documents)


@pytest.fixture
def qa_pipeline(document_store, mock_answer_generator):
    """Q&A pipeline over the sample documents with a mocked generator."""
    from lexdesk.api.services.qa_pipeline import DocumentQAPipeline
    return DocumentQAPipeline(
        store=document_store,
        generator=mock_answer_generator,
        preset="enhanced",
        timeout_seconds=5,
    )


# =============================================================================
# API Test Client
# =============================================================================

@pytest.fixture
def test_client(document_store, qa_pipeline) -> Generator:
    """Create a test client for the FastAPI app."""
    from fastapi.testclient import TestClient
    from lexdesk.app import create_app

    with patch("lexdesk.api.routes.documents.get_document_store", return_value=document_store), \
            patch("lexdesk.api.routes.health.get_document_store", return_value=document_store), \
            patch("lexdesk.api.routes.query.get_qa_pipeline", return_value=qa_pipeline):
        yield TestClient(create_app())


@pytest.fixture
async def async_test_client(document_store, qa_pipeline):
    """Create an async test client."""
    from httpx import AsyncClient, ASGITransport
    from lexdesk.app import create_app

    with patch("lexdesk.api.routes.documents.get_document_store", return_value=document_store), \
            patch("lexdesk.api.routes.health.get_document_store", return_value=document_store), \
            patch("lexdesk.api.routes.query.get_qa_pipeline", return_value=qa_pipeline):
        async with AsyncClient(
            transport=ASGITransport(app=create_app()),
            base_url="http://test"
        ) as client:
            yield client
