"""
Passage segmentation for Helpdesk RAG.

Documents are split on blank lines into paragraph-sized passages. Paragraphs
longer than the configured limit are split again on single newlines so that
one oversized block does not skew length normalization during scoring.
"""

import re
from typing import List

from helpdesk_rag.ingestion.normalizer import normalize_newlines

# A blank line is a line holding only whitespace; runs of them count once.
BLANK_LINE_RE = re.compile(r"\n[^\S\n]*\n(?:[^\S\n]*\n)*")


def split_blocks(text: str) -> List[str]:
    """Split text on blank lines, trim each block and drop empty ones."""
    blocks = BLANK_LINE_RE.split(normalize_newlines(text))
    return [block.strip() for block in blocks if block.strip()]


def split_lines(block: str) -> List[str]:
    """Split a block on single newlines, trim each line and drop empty ones."""
    return [line.strip() for line in block.split("\n") if line.strip()]


def segment_passages(text: str, max_passage_chars: int = 300) -> List[str]:
    """
    Segment document text into ordered passages.

    Args:
        text: Full document text
        max_passage_chars: Blocks longer than this are split per line

    Returns:
        Ordered list of non-empty passages
    """
    passages = []
    for block in split_blocks(text):
        if len(block) > max_passage_chars:
            passages.extend(split_lines(block))
        else:
            passages.append(block)
    return passages
