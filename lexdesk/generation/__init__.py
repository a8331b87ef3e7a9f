"""
LexDesk - Generation Module

This module handles answer generation:
- LLM clients (Anthropic, OpenAI)
- Prompt templates
- The injectable answer generator
"""

from lexdesk.generation.llm import (
    LLMClient,
    LLMMessage,
    LLMResponse,
    AnthropicClient,
    OpenAIClient,
    get_llm_client,
    get_default_llm_client,
)
from lexdesk.generation.prompts import (
    PromptTemplate,
    LEGAL_ASSISTANT_SYSTEM_PROMPT,
    DOCUMENT_QA_USER_PROMPT,
    build_document_qa_prompt,
)
from lexdesk.generation.answer import (
    AnswerGenerator,
    GeneratedAnswer,
    LLMAnswerGenerator,
)

__all__ = [
    # LLM
    "LLMClient",
    "LLMMessage",
    "LLMResponse",
    "AnthropicClient",
    "OpenAIClient",
    "get_llm_client",
    "get_default_llm_client",
    # Prompts
    "PromptTemplate",
    "LEGAL_ASSISTANT_SYSTEM_PROMPT",
    "DOCUMENT_QA_USER_PROMPT",
    "build_document_qa_prompt",
    # Answers
    "AnswerGenerator",
    "GeneratedAnswer",
    "LLMAnswerGenerator",
]
