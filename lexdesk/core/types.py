"""
LexDesk - Shared Type Definitions
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class DocumentCategory(str, Enum):
    """Category label attached to every case document."""
    PLEADING = "Pleading"
    CONTRACT = "Contract"
    CORRESPONDENCE = "Correspondence"
    AFFIDAVIT = "Affidavit"
    MOTION = "Motion"


class RankingPreset(str, Enum):
    """Named ranking configurations."""
    BASIC = "basic"
    ENHANCED = "enhanced"


# =============================================================================
# Document Types
# =============================================================================

class Document(BaseModel):
    """A case document held in the document store."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    case_id: str
    category: DocumentCategory
    content: str
    upload_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DocumentUpdate(BaseModel):
    """Partial update of a document; the id and upload date never change."""
    name: Optional[str] = None
    case_id: Optional[str] = None
    category: Optional[DocumentCategory] = None
    content: Optional[str] = None


class DocumentValidationReport(BaseModel):
    """Outcome of checking uploaded document text for common problems."""
    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
