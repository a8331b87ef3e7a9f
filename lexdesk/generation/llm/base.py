"""
LexDesk - LLM Client Base Classes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from lexdesk.core.exceptions import LLMError, LLMRateLimitError
from lexdesk.core.logging import LoggerMixin


# Only rate limiting is retried; other provider errors fail the answer at once.
retry_on_rate_limit = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=30),
    retry=retry_if_exception_type(LLMRateLimitError),
    reraise=True,
)


@dataclass
class LLMMessage:
    """A message in a conversation."""
    role: str  # "system", "user", "assistant"
    content: str


@dataclass
class LLMResponse:
    """Response from LLM generation."""
    content: str
    model: str
    input_tokens: int
    output_tokens: int
    total_tokens: int
    finish_reason: str
    metadata: dict = field(default_factory=dict)


class LLMClient(ABC, LoggerMixin):
    """Provider-neutral chat completion client."""

    @property
    @abstractmethod
    def provider(self) -> str:
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        pass

    @abstractmethod
    async def generate(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 2048,
        **kwargs: Any,
    ) -> LLMResponse:
        """
        Generate a response from the LLM.

        Args:
            messages: Conversation messages, system prompt first
            model: Model to use (defaults to provider default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate

        Raises:
            LLMRateLimitError: After repeated rate limiting
            LLMError: For any other provider failure
        """
        pass

    def _require_api_key(self, api_key: Optional[str]) -> str:
        if not api_key:
            raise LLMError(self.provider, "API key not configured")
        return api_key

    def _provider_error(self, error: Exception) -> LLMError:
        """Map an SDK exception to LLMRateLimitError or LLMError."""
        text = str(error).lower()
        if "rate" in text and "limit" in text:
            self.logger.warning("LLM rate limited", provider=self.provider)
            return LLMRateLimitError(self.provider)
        self.logger.error("LLM request failed", provider=self.provider, error=str(error))
        return LLMError(self.provider, str(error))

    def _response(
        self,
        content: str,
        model: str,
        input_tokens: int,
        output_tokens: int,
        finish_reason: str,
        response_id: str,
    ) -> LLMResponse:
        self.logger.info(
            "LLM generation complete",
            provider=self.provider,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
        return LLMResponse(
            content=content,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
            finish_reason=finish_reason,
            metadata={"id": response_id},
        )
