"""
LexDesk - Retrieval Module

This module selects the documents handed to answer generation:
- Lexical relevance ranking (basic and enhanced presets)
- Context assembly
"""

from __future__ import annotations

from lexdesk.retrieval.ranking import (
    BASIC_RANKING,
    ENHANCED_RANKING,
    PRESETS,
    LexicalRanker,
    RankingConfig,
    ScoredDocument,
    get_ranking_config,
    load_ranking_overrides,
    rank,
)
from lexdesk.retrieval.context import (
    ContextAssembler,
    AssembledContext,
    assemble_context,
    get_context_assembler,
)

__all__ = [
    # Ranking
    "BASIC_RANKING",
    "ENHANCED_RANKING",
    "PRESETS",
    "LexicalRanker",
    "RankingConfig",
    "ScoredDocument",
    "get_ranking_config",
    "load_ranking_overrides",
    "rank",
    # Context
    "ContextAssembler",
    "AssembledContext",
    "assemble_context",
    "get_context_assembler",
]
