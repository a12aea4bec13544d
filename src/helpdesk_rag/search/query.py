"""
Query processing: ranking and fallback for Helpdesk RAG.
"""

import logging
from typing import List

from helpdesk_rag.core.contracts import Config, SearchResult
from helpdesk_rag.search.snapshot import IndexSnapshot
from helpdesk_rag.search.tokenizer import BM25Tokenizer

logger = logging.getLogger(__name__)


class QueryProcessor:
    """Scores every passage in a snapshot and ranks the matches."""

    def __init__(self, config: Config, tokenizer: BM25Tokenizer):
        """
        Initialize query processor.

        Args:
            config: Configuration with fallback settings
            tokenizer: Tokenizer shared with the index
        """
        self.config = config
        self.tokenizer = tokenizer

    def process_query(self, snapshot: IndexSnapshot, query: str, top_k: int) -> List[SearchResult]:
        """
        Rank passages of a snapshot against a query.

        Args:
            snapshot: Index snapshot to search (read once by the caller)
            query: Free-text query
            top_k: Maximum number of results

        Returns:
            Results sorted by score descending, ties in document then passage
            order. Fallback results when nothing matched.
        """
        if not snapshot.ready:
            return []

        query_terms = self.tokenizer.tokenize_query(query)
        if not query_terms:
            return []

        results = []
        for document, index in zip(snapshot.documents, snapshot.indexes):
            if index is None:
                continue
            for passage_index, score in enumerate(index.get_scores(query_terms)):
                if score > 0:
                    results.append(
                        SearchResult(
                            document=document,
                            passage=document.passages[passage_index],
                            passage_index=passage_index,
                            score=score,
                        )
                    )

        # sorted() is stable, including with reverse=True
        ranked = sorted(results, key=lambda r: r.score, reverse=True)[:top_k]
        if ranked:
            return ranked

        logger.debug("No passage matched %r, using fallback", query)
        return self.fallback_results(snapshot, top_k)

    def fallback_results(self, snapshot: IndexSnapshot, top_k: int) -> List[SearchResult]:
        """
        Leading passages of each document, marked with the fallback score.

        Args:
            snapshot: Index snapshot
            top_k: Maximum number of results

        Returns:
            Up to fallback_passages_per_document passages per document, in
            index order, truncated to top_k
        """
        results = []
        for document in snapshot.documents:
            limit = self.config.fallback_passages_per_document
            for passage_index, passage in enumerate(document.passages[:limit]):
                results.append(
                    SearchResult(
                        document=document,
                        passage=passage,
                        passage_index=passage_index,
                        score=self.config.fallback_score,
                    )
                )
        return results[:top_k]

    def is_fallback(self, result: SearchResult) -> bool:
        """Return True if a result came from the fallback path."""
        return result.score == self.config.fallback_score
