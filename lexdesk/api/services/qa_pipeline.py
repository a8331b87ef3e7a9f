"""
LexDesk - Document Q&A Pipeline Service
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Optional, Union
from uuid import uuid4

from lexdesk.core.config import settings
from lexdesk.core.exceptions import ValidationError
from lexdesk.core.logging import LoggerMixin, bind_log_context, unbind_log_context
from lexdesk.core.types import Document, RankingPreset
from lexdesk.generation import AnswerGenerator, LLMAnswerGenerator
from lexdesk.retrieval import (
    ContextAssembler,
    LexicalRanker,
    ScoredDocument,
    get_ranking_config,
)
from lexdesk.storage import InMemoryDocumentStore, get_document_store


NO_RELEVANT_DOCUMENTS_ANSWER = (
    "I couldn't find any relevant documents to answer your question. Please try "
    "rephrasing your query with different keywords or check if the necessary "
    "documents have been uploaded to the system."
)

GENERATION_FAILED_ANSWER = (
    "I apologize, but I encountered a technical error while processing your request. "
    "Please try again, and if the problem persists, contact system support."
)


@dataclass
class DocumentAnswer:
    """Response from the document Q&A pipeline."""
    query_id: str
    query: str
    answer: str
    sources: list[Document]
    generated: bool
    latency_ms: float
    scores: list[float] = field(default_factory=list)
    model: Optional[str] = None


class DocumentQAPipeline(LoggerMixin):
    """
    Answers questions over the documents in the store.

    Ranking and context assembly are synchronous; only the answer
    generator is awaited. When nothing ranks, the generator is not
    called. When the generator fails or times out, a fixed apology is
    returned together with the ranked sources.
    """

    def __init__(
        self,
        store: Optional[InMemoryDocumentStore] = None,
        generator: Optional[AnswerGenerator] = None,
        assembler: Optional[ContextAssembler] = None,
        preset: Optional[Union[RankingPreset, str]] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.store = store if store is not None else get_document_store()
        self.generator = generator or LLMAnswerGenerator()
        self.assembler = assembler or ContextAssembler()
        self.preset = preset
        self.timeout_seconds = timeout_seconds or settings.GENERATION_TIMEOUT_SECONDS

    def search(
        self,
        question: str,
        case_id: Optional[str] = None,
        preset: Optional[Union[RankingPreset, str]] = None,
    ) -> list[ScoredDocument]:
        """Rank the stored documents for a question without generating."""
        if question is None or not question.strip():
            raise ValidationError("Question must not be empty", field="query")

        ranker = LexicalRanker(get_ranking_config(preset or self.preset))
        return ranker.rank_scored(question, self.store.list(case_id=case_id))

    async def answer(
        self,
        question: str,
        case_id: Optional[str] = None,
        preset: Optional[Union[RankingPreset, str]] = None,
    ) -> DocumentAnswer:
        """
        Answer a question from the stored documents.

        Args:
            question: User's question
            case_id: Restrict retrieval to one case's documents
            preset: Ranking preset override

        Returns:
            DocumentAnswer with the answer and ranked source documents
        """
        start_time = time.time()
        query_id = str(uuid4())
        bind_log_context(query_id=query_id)
        try:
            return await self._answer(query_id, question, case_id, preset, start_time)
        finally:
            unbind_log_context("query_id")

    async def _answer(
        self,
        query_id: str,
        question: str,
        case_id: Optional[str],
        preset: Optional[Union[RankingPreset, str]],
        start_time: float,
    ) -> DocumentAnswer:
        self.logger.info(
            "Starting document Q&A",
            question_length=len(question or ""),
            case_id=case_id,
        )

        ranked = self.search(question, case_id=case_id, preset=preset)
        sources = [s.document for s in ranked]
        scores = [round(s.score, 4) for s in ranked]

        if not sources:
            self.logger.info("No relevant documents")
            return DocumentAnswer(
                query_id=query_id,
                query=question,
                answer=NO_RELEVANT_DOCUMENTS_ANSWER,
                sources=[],
                generated=False,
                latency_ms=(time.time() - start_time) * 1000,
            )

        context = self.assembler.assemble(sources)

        generated = True
        model = None
        try:
            result = await asyncio.wait_for(
                self.generator.generate(question, context.text),
                timeout=self.timeout_seconds,
            )
            answer = result.answer
            model = result.model
        except Exception as e:
            self.logger.warning(
                "Answer generation failed",
                error=str(e) or e.__class__.__name__,
                sources_count=len(sources),
            )
            answer = GENERATION_FAILED_ANSWER
            generated = False

        latency_ms = (time.time() - start_time) * 1000

        self.logger.info(
            "Document Q&A complete",
            latency_ms=round(latency_ms, 2),
            sources_count=len(sources),
            generated=generated,
        )

        return DocumentAnswer(
            query_id=query_id,
            query=question,
            answer=answer,
            sources=sources,
            generated=generated,
            latency_ms=latency_ms,
            scores=scores,
            model=model,
        )


# Singleton instance
_pipeline: Optional[DocumentQAPipeline] = None


def get_qa_pipeline() -> DocumentQAPipeline:
    """Get the global document Q&A pipeline instance."""
    global _pipeline
    if _pipeline is None:
        _pipeline = DocumentQAPipeline()
    return _pipeline


def reset_qa_pipeline() -> None:
    """Drop the global pipeline. Used in testing."""
    global _pipeline
    _pipeline = None
