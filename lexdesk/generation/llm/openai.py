"""
LexDesk - OpenAI LLM Client
"""

from __future__ import annotations

from typing import Any, Optional

from openai import AsyncOpenAI

from lexdesk.core.config import settings
from lexdesk.generation.llm.base import (
    LLMClient,
    LLMMessage,
    LLMResponse,
    retry_on_rate_limit,
)


class OpenAIClient(LLMClient):
    """GPT models via the Chat Completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = "gpt-4o-mini",
    ):
        self._api_key = api_key or settings.OPENAI_API_KEY
        self._default_model = default_model
        self._client: Optional[AsyncOpenAI] = None

    @property
    def provider(self) -> str:
        return "openai"

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._require_api_key(self._api_key))
        return self._client

    @retry_on_rate_limit
    async def generate(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 2048,
        **kwargs: Any,
    ) -> LLMResponse:
        model = model or self._default_model
        client = self.client

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            raise self._provider_error(e) from e

        choice = response.choices[0]
        return self._response(
            content=choice.message.content or "",
            model=model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
            finish_reason=choice.finish_reason or "stop",
            response_id=response.id,
        )


# Singleton instance
_openai_client: Optional[OpenAIClient] = None


def get_openai_client() -> OpenAIClient:
    """Get the global OpenAI client instance."""
    global _openai_client
    if _openai_client is None:
        _openai_client = OpenAIClient()
    return _openai_client
