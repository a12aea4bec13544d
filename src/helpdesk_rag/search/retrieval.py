"""
Retrieval engine for Helpdesk RAG.
"""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from helpdesk_rag.core.contracts import Config, Document, LoadError, LoadReport, SearchResult
from helpdesk_rag.search.query import QueryProcessor
from helpdesk_rag.search.snapshot import IndexSnapshot
from helpdesk_rag.search.tokenizer import BM25Tokenizer
from helpdesk_rag.storage.document_store import DirectorySource, DocumentStore

logger = logging.getLogger(__name__)


class RetrievalEngine:
    """
    End-to-end retrieval: load sources → segment → score → rank.

    The engine holds one IndexSnapshot reference. Readers take the reference
    once per call and never see a partially rebuilt index; reindex() builds a
    new snapshot and replaces the reference in a single assignment. Only
    reindex() calls are serialized against each other.
    """

    def __init__(
        self,
        source: DirectorySource,
        config: Optional[Config] = None,
        load: bool = True,
    ):
        """
        Initialize retrieval engine.

        Args:
            source: Corpus provider (list_names() and read_bytes(name))
            config: Configuration (defaults if omitted)
            load: Load the corpus immediately; otherwise the engine stays
                unready until reindex() is called
        """
        self.source = source
        self.config = config or Config()
        self.tokenizer = BM25Tokenizer()
        self.store = DocumentStore(self.config)
        self.query_processor = QueryProcessor(self.config, self.tokenizer)
        self._snapshot = IndexSnapshot()
        self._reindex_lock = threading.Lock()

        if load:
            self.reindex()

    @classmethod
    def from_directory(
        cls, path: Union[str, Path], config: Optional[Config] = None
    ) -> "RetrievalEngine":
        """Create an engine over a directory of .md/.txt files and load it."""
        return cls(DirectorySource(path), config)

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    @property
    def ready(self) -> bool:
        return self._snapshot.ready

    @property
    def load_errors(self) -> List[LoadError]:
        """Per-source errors from the most recent load."""
        return list(self._snapshot.errors)

    def reindex(self) -> LoadReport:
        """
        Reload every source and publish a new snapshot.

        Searches running during the rebuild keep using the previous snapshot.

        Returns:
            LoadReport of the new snapshot
        """
        with self._reindex_lock:
            report = self.store.load_from(self.source)
            snapshot = IndexSnapshot.build(report, self.config, self.tokenizer)
            self._snapshot = snapshot

        logger.info(
            "Indexed %d documents from %s", len(snapshot.documents), self.source
        )
        return report

    def search(self, query: str, top_k: Optional[int] = None) -> List[SearchResult]:
        """
        Search the index.

        Args:
            query: Free-text query
            top_k: Maximum number of results (config.default_top_k if omitted)

        Returns:
            At most top_k SearchResult objects, highest score first. Empty
            for an unready index, an empty corpus or a query without terms.
        """
        if top_k is None:
            top_k = self.config.default_top_k
        if top_k < 1:
            raise ValueError(f"top_k must be positive, got {top_k}")

        return self.query_processor.process_query(self._snapshot, query, top_k)

    def is_fallback(self, result: SearchResult) -> bool:
        return self.query_processor.is_fallback(result)

    def get_document(self, filename: str) -> Optional[Document]:
        return self._snapshot.by_filename.get(filename)

    def get_all_documents(self) -> List[Document]:
        return list(self._snapshot.documents)

    def get_document_count(self) -> int:
        return len(self._snapshot.documents)

    def get_filenames(self) -> List[str]:
        return [doc.filename for doc in self._snapshot.documents]
