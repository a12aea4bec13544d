"""
Document ingestion pipeline: decoding, segmentation and Document construction.
"""

from helpdesk_rag.ingestion.normalizer import decode_source, normalize_newlines
from helpdesk_rag.ingestion.parsers import (
    document_id,
    filter_sources,
    is_knowledge_source,
    parse_source,
    parse_text,
)
from helpdesk_rag.ingestion.segmenter import segment_passages

__all__ = [
    "decode_source",
    "normalize_newlines",
    "document_id",
    "filter_sources",
    "is_knowledge_source",
    "parse_source",
    "parse_text",
    "segment_passages",
]
