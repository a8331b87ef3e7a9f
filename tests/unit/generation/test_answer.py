"""
Tests for lexdesk/generation/answer.py and prompt templates
"""

from unittest.mock import AsyncMock, patch

import pytest

from lexdesk.core.exceptions import GenerationError
from lexdesk.generation.answer import AnswerGenerator, GeneratedAnswer, LLMAnswerGenerator
from lexdesk.generation.llm.base import LLMResponse
from lexdesk.generation.prompts import (
    DOCUMENT_QA_USER_PROMPT,
    LEGAL_ASSISTANT_SYSTEM_PROMPT,
    build_document_qa_prompt,
)


class TestPromptTemplates:
    """Tests for the document Q&A prompts."""

    def test_system_prompt_names_firm(self):
        """Test that the firm name is inserted into the system prompt."""
        text = LEGAL_ASSISTANT_SYSTEM_PROMPT.format(firm_name="Okello & Partners")
        assert "Okello & Partners" in text
        assert "EXCLUSIVELY" in text

    def test_build_prompt(self):
        """Test that question and context land in the user prompt."""
        system, user = build_document_qa_prompt(
            "Who is the buyer?",
            '---\nDocument 1: "a.pdf" (Type: Contract)\nContent:\nx\n---',
        )

        assert "legal assistant" in system
        assert 'USER\'S QUESTION: "Who is the buyer?"' in user
        assert 'Document 1: "a.pdf"' in user
        assert user.startswith("AVAILABLE DOCUMENTS:")

    def test_user_template_placeholders(self):
        """Test that the user template needs context and question."""
        with pytest.raises(KeyError):
            DOCUMENT_QA_USER_PROMPT.format(context="x")


class TestAnswerGenerator:
    """Tests for the AnswerGenerator interface."""

    def test_is_abstract(self):
        """Test that AnswerGenerator cannot be instantiated."""
        with pytest.raises(TypeError):
            AnswerGenerator()


class TestLLMAnswerGenerator:
    """Tests for the LLM-backed answer generator."""

    @pytest.mark.asyncio
    async def test_generate(self, mock_llm_client):
        """Test answer generation through the LLM client."""
        generator = LLMAnswerGenerator(llm_client=mock_llm_client)

        result = await generator.generate("Who is the buyer?", "context text")

        assert isinstance(result, GeneratedAnswer)
        assert result.answer == "This is a generated response based on the context."
        assert result.model == "test-model"
        assert result.tokens_used == 150

    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self, mock_llm_client):
        """Test that the prompts are sent as system and user messages."""
        generator = LLMAnswerGenerator(llm_client=mock_llm_client, temperature=0.1, max_tokens=500)

        await generator.generate("Who is the buyer?", "context text")

        kwargs = mock_llm_client.generate.call_args.kwargs
        roles = [m.role for m in kwargs["messages"]]
        assert roles == ["system", "user"]
        assert "context text" in kwargs["messages"][1].content
        assert kwargs["temperature"] == 0.1
        assert kwargs["max_tokens"] == 500

    @pytest.mark.asyncio
    async def test_empty_answer_raises(self, mock_llm_client):
        """Test that a blank completion is treated as a failure."""
        mock_llm_client.generate = AsyncMock(return_value=LLMResponse(
            content="   ",
            model="test-model",
            input_tokens=10,
            output_tokens=0,
            total_tokens=10,
            finish_reason="end_turn",
        ))
        generator = LLMAnswerGenerator(llm_client=mock_llm_client)

        with pytest.raises(GenerationError):
            await generator.generate("Who is the buyer?", "context text")

    def test_llm_client_resolved_lazily(self, mock_llm_client):
        """Test that the default client is only looked up on first use."""
        with patch(
            "lexdesk.generation.answer.get_default_llm_client",
            return_value=mock_llm_client,
        ) as factory:
            generator = LLMAnswerGenerator()
            factory.assert_not_called()
            assert generator.llm_client is mock_llm_client
            factory.assert_called_once()
