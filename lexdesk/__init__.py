"""
LexDesk - Case Document Q&A Service
"""

__version__ = "0.1.0"
