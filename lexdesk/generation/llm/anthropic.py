"""
LexDesk - Anthropic (Claude) LLM Client
"""

from __future__ import annotations

from typing import Any, Optional

from anthropic import AsyncAnthropic

from lexdesk.core.config import settings
from lexdesk.generation.llm.base import (
    LLMClient,
    LLMMessage,
    LLMResponse,
    retry_on_rate_limit,
)


def split_system_prompt(messages: list[LLMMessage]) -> tuple[str, list[dict]]:
    """Separate system messages, which the Messages API takes as a parameter."""
    system = "\n\n".join(m.content for m in messages if m.role == "system")
    turns = [
        {"role": m.role, "content": m.content}
        for m in messages if m.role != "system"
    ]
    return system, turns


class AnthropicClient(LLMClient):
    """Claude via the Anthropic Messages API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: Optional[str] = None,
    ):
        self._api_key = api_key or settings.ANTHROPIC_API_KEY
        self._default_model = default_model or settings.DEFAULT_LLM_MODEL
        self._client: Optional[AsyncAnthropic] = None

    @property
    def provider(self) -> str:
        return "anthropic"

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def client(self) -> AsyncAnthropic:
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self._require_api_key(self._api_key))
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
        system, turns = split_system_prompt(messages)
        client = self.client

        try:
            response = await client.messages.create(
                model=model,
                system=system,
                messages=turns,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            raise self._provider_error(e) from e

        return self._response(
            content="".join(getattr(block, "text", "") for block in response.content),
            model=model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            finish_reason=response.stop_reason or "end_turn",
            response_id=response.id,
        )


# Singleton instance
_anthropic_client: Optional[AnthropicClient] = None


def get_anthropic_client() -> AnthropicClient:
    """Get the global Anthropic client instance."""
    global _anthropic_client
    if _anthropic_client is None:
        _anthropic_client = AnthropicClient()
    return _anthropic_client
