"""
LexDesk - Context Assembly

Turns ranked documents into a single bounded text block for the answer
generation prompt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from lexdesk.core.config import settings
from lexdesk.core.exceptions import InvalidArgumentError
from lexdesk.core.logging import LoggerMixin
from lexdesk.core.types import Document


BLOCK_DELIMITER = "---"
TRUNCATION_MARKER = "... [truncated]"


def escape_delimiter_lines(text: str) -> str:
    """Indent every line that would otherwise read as BLOCK_DELIMITER."""
    return "\n".join(
        " " + line if line.strip() == BLOCK_DELIMITER else line
        for line in text.split("\n")
    )


@dataclass
class AssembledContext:
    """Result of context assembly."""
    text: str
    documents_count: int
    truncated_document_ids: list[str] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        return bool(self.truncated_document_ids)


class ContextAssembler(LoggerMixin):
    """
    Assembles the prompt context from ranked documents.

    Each document becomes one block: a header with its ordinal, name and
    category, then its content cut to ``excerpt_limit`` characters. Cut
    excerpts end with TRUNCATION_MARKER. Blocks keep ranked order and are
    separated by a blank line, each fenced by a line holding only
    BLOCK_DELIMITER. Content lines that would read as a fence are indented
    by one space so they cannot end a block early.
    """

    def __init__(self, excerpt_limit: Optional[int] = None):
        """
        Initialize context assembler.

        Args:
            excerpt_limit: Maximum characters of content kept per document
        """
        if excerpt_limit is None:
            excerpt_limit = settings.CONTEXT_EXCERPT_LIMIT
        if excerpt_limit <= 0:
            raise InvalidArgumentError("excerpt_limit", "must be positive")
        self.excerpt_limit = excerpt_limit

    def assemble(self, documents: Sequence[Document]) -> AssembledContext:
        """
        Assemble context from ranked documents.

        Args:
            documents: Documents in ranked order

        Returns:
            AssembledContext; an empty sequence gives empty text
        """
        if documents is None:
            raise InvalidArgumentError("documents")

        if not documents:
            return AssembledContext(text="", documents_count=0)

        blocks = []
        truncated_ids = []
        for position, document in enumerate(documents, 1):
            excerpt, was_truncated = self._excerpt(document.content)
            excerpt = escape_delimiter_lines(excerpt)
            if was_truncated:
                truncated_ids.append(document.id)
            blocks.append(self._format_block(position, document, excerpt))

        text = "\n\n".join(blocks)

        self.logger.info(
            "Context assembled",
            documents=len(blocks),
            truncated=len(truncated_ids),
            characters=len(text),
        )

        return AssembledContext(
            text=text,
            documents_count=len(blocks),
            truncated_document_ids=truncated_ids,
        )

    def _excerpt(self, content: str) -> tuple[str, bool]:
        """Cut content to the excerpt limit."""
        if len(content) <= self.excerpt_limit:
            return content, False
        return content[:self.excerpt_limit] + TRUNCATION_MARKER, True

    def _format_block(self, position: int, document: Document, excerpt: str) -> str:
        return (
            f"{BLOCK_DELIMITER}\n"
            f'Document {position}: "{document.name}" (Type: {document.category.value})\n'
            f"Content:\n"
            f"{excerpt}\n"
            f"{BLOCK_DELIMITER}"
        )


def assemble_context(
    documents: Sequence[Document],
    excerpt_limit: Optional[int] = None,
) -> str:
    """Build the context string for ranked documents."""
    return ContextAssembler(excerpt_limit).assemble(documents).text


# Singleton instance
_assembler: Optional[ContextAssembler] = None


def get_context_assembler() -> ContextAssembler:
    """Get the global context assembler instance."""
    global _assembler
    if _assembler is None:
        _assembler = ContextAssembler()
    return _assembler
