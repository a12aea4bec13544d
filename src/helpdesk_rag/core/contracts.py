"""
Core data structures (dataclasses) for Helpdesk RAG.

All core data structures are defined as explicit dataclasses. Documents and
search results are frozen: once an index snapshot is published nothing in it
is mutated.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class Config:
    """Configuration for loading, segmenting and scoring."""

    # BM25 parameters
    bm25_k1: float = 1.2
    bm25_b: float = 0.75

    # Match bonuses added on top of the BM25 sum
    partial_match_weight: float = 0.5  # scaled by matched / query term count
    presence_bonus: float = 0.1

    # Segmentation
    max_passage_chars: int = 300  # longer blocks are split on single newlines

    # Fallback when nothing scores
    fallback_score: float = 0.01
    fallback_passages_per_document: int = 2

    # Sources
    source_suffixes: Tuple[str, ...] = (".md", ".txt")
    encoding: str = "utf-8"

    # Caller defaults
    default_top_k: int = 3
    citation_preview_chars: int = 150

    def __post_init__(self):
        # JSON config files give a list or a single string
        if isinstance(self.source_suffixes, str):
            self.source_suffixes = (self.source_suffixes,)
        self.source_suffixes = tuple(s.lower() for s in self.source_suffixes)


@dataclass(frozen=True)
class Document:
    """
    A knowledge-base document and its passages.

    Passage order is meaningful: SearchResult.passage_index and citations
    refer to positions in `passages`.
    """

    id: str  # filename without extension
    filename: str  # citation key
    content: str  # decoded text as loaded
    passages: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    """A scored passage returned by one search call."""

    document: Document
    passage: str
    passage_index: int
    score: float


@dataclass(frozen=True)
class Citation:
    """Source attribution derived from a SearchResult."""

    filename: str
    passage_index: int
    text: str  # truncated passage preview


@dataclass(frozen=True)
class LoadError:
    """A source that could not be listed, read or decoded."""

    name: str
    message: str


@dataclass
class LoadReport:
    """Outcome of one load pass over the source corpus."""

    documents: List[Document] = field(default_factory=list)
    errors: List[LoadError] = field(default_factory=list)

    @property
    def filenames(self) -> List[str]:
        return [doc.filename for doc in self.documents]

    def passage_counts(self) -> Dict[str, int]:
        return {doc.filename: len(doc.passages) for doc in self.documents}
