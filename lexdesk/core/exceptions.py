"""
LexDesk - Custom Exceptions
"""

from typing import Any, Optional


class LexDeskException(Exception):
    """Base exception for all LexDesk errors."""

    def __init__(
        self,
        message: str,
        code: str = "LEXDESK_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Body returned to API clients."""
        return {"error": self.code, "message": self.message, "details": self.details}


# =============================================================================
# Argument Exceptions
# =============================================================================

class InvalidArgumentError(LexDeskException):
    """Raised when a required argument is missing or out of range."""

    def __init__(self, argument: str, reason: str = "a value is required"):
        super().__init__(
            message=f"Invalid argument '{argument}': {reason}",
            code="INVALID_ARGUMENT",
            details={"argument": argument, "reason": reason},
        )


# =============================================================================
# Retrieval Exceptions
# =============================================================================

class RetrievalError(LexDeskException):
    """Base exception for retrieval errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="RETRIEVAL_ERROR", details=details)


class DocumentNotFoundError(RetrievalError):
    """Raised when a document id is not present in the store."""

    def __init__(self, document_id: str):
        super().__init__(
            message=f"Document not found: {document_id}",
            details={"document_id": document_id}
        )
        self.code = "DOCUMENT_NOT_FOUND"


class DuplicateDocumentError(RetrievalError):
    """Raised when a document id is already taken."""

    def __init__(self, document_id: str):
        super().__init__(
            message=f"Document already exists: {document_id}",
            details={"document_id": document_id}
        )


# =============================================================================
# Generation Exceptions
# =============================================================================

class GenerationError(LexDeskException):
    """Base exception for generation errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="GENERATION_ERROR", details=details)


class LLMError(GenerationError):
    """Raised when LLM operations fail."""

    def __init__(self, provider: str, message: str):
        super().__init__(
            message=f"LLM error ({provider}): {message}",
            details={"provider": provider}
        )


class LLMRateLimitError(LLMError):
    """Raised when LLM rate limit is exceeded."""

    def __init__(self, provider: str, retry_after: Optional[int] = None):
        super().__init__(
            provider=provider,
            message="Rate limit exceeded"
        )
        self.retry_after = retry_after


# =============================================================================
# Validation Exceptions
# =============================================================================

class ValidationError(LexDeskException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field} if field else {}
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigurationError(LexDeskException):
    """Raised when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")
