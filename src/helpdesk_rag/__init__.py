"""
Helpdesk RAG - lexical retrieval engine for a support-chat knowledge base.
"""

from helpdesk_rag.core import Config, Document, SearchResult
from helpdesk_rag.rag.context import build_citations
from helpdesk_rag.search.retrieval import RetrievalEngine
from helpdesk_rag.storage import DirectorySource

__version__ = "0.1.0"

__all__ = [
    "RetrievalEngine",
    "DirectorySource",
    "Config",
    "Document",
    "SearchResult",
    "build_citations",
]
