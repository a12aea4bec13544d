"""
Immutable index snapshots for Helpdesk RAG.

A snapshot pairs the loaded Documents with their per-document BM25
statistics. Nothing in a snapshot is mutated after it is built; a reindex
builds a new snapshot and the engine swaps its reference.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from helpdesk_rag.core.contracts import Config, Document, LoadError, LoadReport
from helpdesk_rag.search.bm25_index import BM25Index
from helpdesk_rag.search.tokenizer import BM25Tokenizer


@dataclass(frozen=True)
class IndexSnapshot:
    """
    A fully built view of the index.

    `indexes[i]` holds the BM25 statistics for `documents[i]`, or None when
    that document has no passages. The default instance is the unready state.
    """

    documents: Tuple[Document, ...] = ()
    indexes: Tuple[Optional[BM25Index], ...] = ()
    by_filename: Dict[str, Document] = field(default_factory=dict)
    errors: Tuple[LoadError, ...] = ()
    ready: bool = False

    @classmethod
    def build(
        cls,
        report: LoadReport,
        config: Config,
        tokenizer: Optional[BM25Tokenizer] = None,
    ) -> "IndexSnapshot":
        """
        Freeze a load report into a ready snapshot.

        Args:
            report: Result of DocumentStore.load
            config: BM25 parameters
            tokenizer: Tokenizer shared with query processing

        Returns:
            Ready IndexSnapshot (possibly with zero documents)
        """
        tokenizer = tokenizer or BM25Tokenizer()
        documents = tuple(report.documents)
        indexes = tuple(
            BM25Index(config, tokenizer).build(doc.passages) if doc.passages else None
            for doc in documents
        )

        # First document wins on a duplicate filename
        by_filename: Dict[str, Document] = {}
        for doc in documents:
            by_filename.setdefault(doc.filename, doc)

        return cls(
            documents=documents,
            indexes=indexes,
            by_filename=by_filename,
            errors=tuple(report.errors),
            ready=True,
        )
