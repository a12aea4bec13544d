"""
Core contracts for Helpdesk RAG.
"""

from helpdesk_rag.core.contracts import (
    Citation,
    Config,
    Document,
    LoadError,
    LoadReport,
    SearchResult,
)

__all__ = [
    "Config",
    "Document",
    "SearchResult",
    "Citation",
    "LoadError",
    "LoadReport",
]
