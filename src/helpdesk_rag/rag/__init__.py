"""
Caller-side helpers: citations and context assembly.
"""

from helpdesk_rag.rag.context import assemble_context, build_citations, preview

__all__ = [
    "assemble_context",
    "build_citations",
    "preview",
]
