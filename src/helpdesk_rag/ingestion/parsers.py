"""
Knowledge-base source parsing for Helpdesk RAG.

Only text sources are indexed: Markdown and plain text files.
"""

import os
from typing import Iterable, List, Sequence

from helpdesk_rag.core.contracts import Config, Document
from helpdesk_rag.ingestion.normalizer import decode_source
from helpdesk_rag.ingestion.segmenter import segment_passages


def is_knowledge_source(name: str, suffixes: Sequence[str] = (".md", ".txt")) -> bool:
    """Return True if the source name ends in a recognized suffix."""
    return name.lower().endswith(tuple(suffixes))


def filter_sources(names: Iterable[str], suffixes: Sequence[str] = (".md", ".txt")) -> List[str]:
    """Keep recognized source names, preserving their order."""
    return [name for name in names if is_knowledge_source(name, suffixes)]


def document_id(filename: str) -> str:
    """Derive the stable document id: the filename without its extension."""
    return os.path.splitext(os.path.basename(filename))[0]


def parse_text(filename: str, text: str, config: Config) -> Document:
    """
    Build a Document from decoded text.

    Args:
        filename: Source name, used as the citation key
        text: Decoded document text
        config: Configuration with segmentation settings

    Returns:
        Document with its passages (possibly none for blank content)
    """
    passages = segment_passages(text, config.max_passage_chars)
    return Document(
        id=document_id(filename),
        filename=filename,
        content=text,
        passages=tuple(passages),
    )


def parse_source(filename: str, raw: bytes, config: Config) -> Document:
    """
    Decode raw source bytes and build a Document.

    Raises:
        UnicodeDecodeError: If the bytes are not valid in config.encoding
    """
    return parse_text(filename, decode_source(raw, config.encoding), config)
