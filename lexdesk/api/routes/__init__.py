"""
LexDesk - API Routes
"""

from __future__ import annotations

from lexdesk.api.routes import documents, health, query

__all__ = ["documents", "health", "query"]
