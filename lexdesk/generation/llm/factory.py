"""
LexDesk - LLM Client Factory
"""

from __future__ import annotations

from typing import Optional

from lexdesk.core.config import settings
from lexdesk.core.exceptions import ConfigurationError
from lexdesk.generation.llm.base import LLMClient
from lexdesk.generation.llm.anthropic import get_anthropic_client
from lexdesk.generation.llm.openai import get_openai_client


def get_llm_client(provider: Optional[str] = None) -> LLMClient:
    """
    Get an LLM client for the specified provider.

    Args:
        provider: Provider name ("anthropic", "openai").
                 Defaults to settings.DEFAULT_LLM_PROVIDER

    Returns:
        LLMClient instance

    Raises:
        ConfigurationError: If provider is not supported
    """
    provider = provider or settings.DEFAULT_LLM_PROVIDER

    if provider == "anthropic":
        return get_anthropic_client()
    elif provider == "openai":
        return get_openai_client()
    else:
        raise ConfigurationError(f"Unsupported LLM provider: {provider}")


# Default client based on configuration
_default_client: Optional[LLMClient] = None


def get_default_llm_client() -> LLMClient:
    """Get the default LLM client based on configuration."""
    global _default_client
    if _default_client is None:
        _default_client = get_llm_client()
    return _default_client


def reset_llm_client() -> None:
    """Reset the cached LLM client. Used in testing."""
    global _default_client
    _default_client = None
