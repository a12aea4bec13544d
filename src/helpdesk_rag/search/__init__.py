"""
Search layer: BM25 tokenizer, scorer, snapshots, ranking and the retrieval engine.
"""

from helpdesk_rag.search.bm25_index import BM25Index, PassageBM25, score_passage
from helpdesk_rag.search.query import QueryProcessor
from helpdesk_rag.search.retrieval import RetrievalEngine
from helpdesk_rag.search.snapshot import IndexSnapshot
from helpdesk_rag.search.tokenizer import BM25Tokenizer

__all__ = [
    "BM25Tokenizer",
    "BM25Index",
    "PassageBM25",
    "score_passage",
    "IndexSnapshot",
    "QueryProcessor",
    "RetrievalEngine",
]
