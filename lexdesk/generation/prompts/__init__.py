"""
LexDesk - Prompts Module
"""

from lexdesk.generation.prompts.templates import (
    PromptTemplate,
    LEGAL_ASSISTANT_SYSTEM_PROMPT,
    DOCUMENT_QA_USER_PROMPT,
    build_document_qa_prompt,
)

__all__ = [
    "PromptTemplate",
    "LEGAL_ASSISTANT_SYSTEM_PROMPT",
    "DOCUMENT_QA_USER_PROMPT",
    "build_document_qa_prompt",
]
