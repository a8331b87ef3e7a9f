"""
LexDesk - Prompt Templates
"""

from dataclasses import dataclass

from lexdesk.core.config import settings


@dataclass
class PromptTemplate:
    """A prompt template with placeholders."""
    template: str
    name: str
    description: str = ""

    def format(self, **kwargs) -> str:
        """Format the template with provided values."""
        return self.template.format(**kwargs)


# =============================================================================
# Document Q&A Prompts
# =============================================================================

LEGAL_ASSISTANT_SYSTEM_PROMPT = PromptTemplate(
    name="legal_assistant_system",
    description="System prompt for answering questions over case documents",
    template="""You are an expert AI legal assistant for {firm_name}.

Guidelines:
- Answer the question based EXCLUSIVELY on the provided document content
- Be precise, professional and comprehensive
- If information spans multiple documents, synthesize it coherently
- Always cite the document names you used, e.g. "(Source: Supply_Agreement_v2.pdf)"
- If the answer cannot be found in the documents, state this limitation clearly
- Do not make up information that isn't in the documents
- Structure complex answers with clear sections"""
)

DOCUMENT_QA_USER_PROMPT = PromptTemplate(
    name="document_qa_user",
    description="User prompt carrying the assembled document context",
    template="""AVAILABLE DOCUMENTS:
{context}

USER'S QUESTION: "{question}"

RESPONSE:"""
)


def build_document_qa_prompt(question: str, context: str) -> tuple[str, str]:
    """
    Build the system and user messages for a document question.

    Args:
        question: The user's question
        context: Assembled document context

    Returns:
        (system_prompt, user_prompt)
    """
    system_prompt = LEGAL_ASSISTANT_SYSTEM_PROMPT.format(firm_name=settings.FIRM_NAME)
    user_prompt = DOCUMENT_QA_USER_PROMPT.format(context=context, question=question)
    return system_prompt, user_prompt
