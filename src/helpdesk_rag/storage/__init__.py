"""
Storage layer: corpus provider and document store.
"""

from helpdesk_rag.storage.document_store import DirectorySource, DocumentStore

__all__ = [
    "DirectorySource",
    "DocumentStore",
]
