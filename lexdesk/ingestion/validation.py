"""
LexDesk - Document Content Validation

Checks uploaded document text for problems that degrade ranking and
answer quality: truncated uploads, oversize documents, OCR damage and
broken formatting.
"""

from __future__ import annotations

from lexdesk.core.exceptions import InvalidArgumentError
from lexdesk.core.types import DocumentValidationReport


MIN_CONTENT_LENGTH = 100
MAX_CONTENT_LENGTH = 50_000
MIN_WORD_COUNT = 20
REPLACEMENT_CHARACTER = "\ufffd"


def validate_document_content(content: str) -> DocumentValidationReport:
    """
    Validate document text before it is stored.

    Args:
        content: Extracted document text

    Returns:
        DocumentValidationReport listing issues with a suggestion for each
    """
    if content is None:
        raise InvalidArgumentError("content")

    issues: list[str] = []
    suggestions: list[str] = []

    if len(content) < MIN_CONTENT_LENGTH:
        issues.append(f"Document content is very short (less than {MIN_CONTENT_LENGTH} characters)")
        suggestions.append("Ensure the complete document content has been uploaded")

    if len(content) > MAX_CONTENT_LENGTH:
        issues.append(f"Document content is very long (over {MAX_CONTENT_LENGTH:,} characters)")
        suggestions.append("Consider breaking large documents into smaller sections for better analysis")

    if REPLACEMENT_CHARACTER in content:
        issues.append("Document contains invalid characters, possibly from OCR errors")
        suggestions.append("Review the document for scanning or encoding issues")

    words = content.split()
    if len(words) < len(content) / 10:
        issues.append("Document appears to have formatting issues or excessive whitespace")
        suggestions.append("Clean up document formatting for better analysis results")

    if len(words) < MIN_WORD_COUNT:
        issues.append(f"Document has very few words ({len(words)})")
        suggestions.append("Ensure complete document content is provided for meaningful analysis")

    return DocumentValidationReport(
        is_valid=not issues,
        issues=issues,
        suggestions=suggestions,
    )
