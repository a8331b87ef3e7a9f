"""
LexDesk - Context Assembly Module
"""

from lexdesk.retrieval.context.assembler import (
    BLOCK_DELIMITER,
    TRUNCATION_MARKER,
    ContextAssembler,
    escape_delimiter_lines,
    AssembledContext,
    assemble_context,
    get_context_assembler,
)

__all__ = [
    "BLOCK_DELIMITER",
    "TRUNCATION_MARKER",
    "escape_delimiter_lines",
    "ContextAssembler",
    "AssembledContext",
    "assemble_context",
    "get_context_assembler",
]
