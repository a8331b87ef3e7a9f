"""
LexDesk - Answer Generation

The answer generator is the only latency-bearing, failure-prone step of a
document question. It is injected into the pipeline so retrieval and its
tests never need network access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from lexdesk.core.config import settings
from lexdesk.core.exceptions import GenerationError
from lexdesk.core.logging import LoggerMixin
from lexdesk.generation.llm import LLMClient, LLMMessage, get_default_llm_client
from lexdesk.generation.prompts import build_document_qa_prompt


@dataclass
class GeneratedAnswer:
    """Free-text answer produced for a question and its context."""
    answer: str
    model: Optional[str] = None
    tokens_used: int = 0
    metadata: dict = field(default_factory=dict)


class AnswerGenerator(ABC):
    """Turns a question and its document context into an answer."""

    @abstractmethod
    async def generate(self, query: str, context: str) -> GeneratedAnswer:
        """
        Generate an answer.

        Raises:
            GenerationError: If no usable answer could be produced
        """
        pass


class LLMAnswerGenerator(AnswerGenerator, LoggerMixin):
    """Answer generator backed by an LLM client."""

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self._llm_client = llm_client
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS

    @property
    def llm_client(self) -> LLMClient:
        if self._llm_client is None:
            self._llm_client = get_default_llm_client()
        return self._llm_client

    async def generate(self, query: str, context: str) -> GeneratedAnswer:
        system_prompt, user_prompt = build_document_qa_prompt(query, context)

        response = await self.llm_client.generate(
            messages=[
                LLMMessage(role="system", content=system_prompt),
                LLMMessage(role="user", content=user_prompt),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        answer = (response.content or "").strip()
        if not answer:
            raise GenerationError(
                "Empty response from answer model",
                details={"model": response.model},
            )

        return GeneratedAnswer(
            answer=answer,
            model=response.model,
            tokens_used=response.total_tokens,
            metadata=response.metadata,
        )
