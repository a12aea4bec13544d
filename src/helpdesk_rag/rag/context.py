"""
Citations and context assembly for answer generation.

These are pure functions over search results; the engine itself never
formats citations.
"""

from typing import List

from helpdesk_rag.core.contracts import Citation, SearchResult


def preview(text: str, max_chars: int = 150) -> str:
    """First max_chars characters of a passage followed by an ellipsis."""
    return text[:max_chars] + "..."


def build_citations(results: List[SearchResult], preview_chars: int = 150) -> List[Citation]:
    """
    Derive citations from search results, one per result, in result order.

    Args:
        results: Search results
        preview_chars: Length of the passage preview

    Returns:
        List of Citation objects
    """
    return [
        Citation(
            filename=result.document.filename,
            passage_index=result.passage_index,
            text=preview(result.passage, preview_chars),
        )
        for result in results
    ]


def assemble_context(results: List[SearchResult]) -> str:
    """
    Assemble context from search results with source tags.

    Args:
        results: Search results

    Returns:
        Context string, one tagged passage per block
    """
    context_parts = []
    seen = set()

    for result in results:
        key = (result.document.filename, result.passage_index)
        if key in seen:
            continue
        seen.add(key)

        citation = f"[Source: {result.document.filename}#{result.passage_index}]"
        context_parts.append(f"{citation} {result.passage}")

    return "\n\n".join(context_parts)
