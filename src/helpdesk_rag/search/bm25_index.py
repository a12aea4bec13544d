"""
BM25 passage scoring for Helpdesk RAG.

Corpus statistics are scoped per document: a passage is scored against the
other passages of its own document, never the whole collection. Statistics
are computed once per document when an index snapshot is built, using the
rank-bm25 base class for term frequencies, lengths and document frequencies.
"""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence

from rank_bm25 import BM25

from helpdesk_rag.core.contracts import Config
from helpdesk_rag.search.tokenizer import BM25Tokenizer


class PassageBM25(BM25):
    """
    Classic BM25 over the passages of one document, plus match bonuses.

    idf(t) = ln((N + 1) / (df(t) + 1)), so it is never negative. Any passage
    matching at least one query term also receives a partial-match bonus
    (matched distinct terms / query length * partial_match_weight) and a flat
    presence bonus. A passage matching nothing scores exactly 0.
    """

    def __init__(
        self,
        corpus: List[List[str]],
        k1: float = 1.2,
        b: float = 0.75,
        partial_match_weight: float = 0.5,
        presence_bonus: float = 0.1,
    ):
        """
        Initialize scorer statistics.

        Args:
            corpus: Tokenized passages of one document (must not be empty)
            k1: Term frequency saturation
            b: Length normalization strength
            partial_match_weight: Weight of the matched-term ratio bonus
            presence_bonus: Flat bonus for any match
        """
        self.k1 = k1
        self.b = b
        self.partial_match_weight = partial_match_weight
        self.presence_bonus = presence_bonus
        super().__init__(corpus)

    @classmethod
    def from_config(cls, corpus: List[List[str]], config: Config) -> "PassageBM25":
        return cls(
            corpus,
            k1=config.bm25_k1,
            b=config.bm25_b,
            partial_match_weight=config.partial_match_weight,
            presence_bonus=config.presence_bonus,
        )

    def _calc_idf(self, nd: Dict[str, int]):
        for word, freq in nd.items():
            self.idf[word] = math.log((self.corpus_size + 1) / (freq + 1))

    def _term_idf(self, term: str) -> float:
        idf = self.idf.get(term)
        if idf is None:
            # Term absent from every sibling (df = 0)
            idf = math.log(self.corpus_size + 1)
        return idf

    def score_frequencies(
        self, query: Sequence[str], frequencies: Dict[str, int], doc_len: int
    ) -> float:
        """
        Score one passage given its term frequencies and token count.

        Args:
            query: Query terms (duplicates allowed; each distinct term scores once)
            frequencies: term -> count within the passage
            doc_len: Passage token count

        Returns:
            Non-negative score, 0.0 when no query term occurs in the passage
        """
        if not query:
            return 0.0

        avgdl = self.avgdl if self.avgdl > 0 else 1.0
        length_norm = 1 - self.b + self.b * doc_len / avgdl

        score = 0.0
        matched = 0
        for term in dict.fromkeys(query):
            tf = frequencies.get(term, 0)
            if tf == 0:
                continue
            matched += 1
            score += self._term_idf(term) * (tf * (self.k1 + 1)) / (tf + self.k1 * length_norm)

        if matched > 0:
            score += (matched / len(query)) * self.partial_match_weight
            score += self.presence_bonus

        return score

    def score_tokens(self, query: Sequence[str], passage_tokens: Sequence[str]) -> float:
        """Score a tokenized passage against this document's statistics."""
        return self.score_frequencies(query, Counter(passage_tokens), len(passage_tokens))

    def get_scores(self, query: Sequence[str]) -> List[float]:
        """Score every passage of the document, in passage order."""
        return [
            self.score_frequencies(query, self.doc_freqs[i], self.doc_len[i])
            for i in range(self.corpus_size)
        ]


class BM25Index:
    """
    Precomputed BM25 statistics for the passages of one document.

    Built once per load; read-only afterwards, so concurrent searches can
    share it.
    """

    def __init__(self, config: Config, tokenizer: Optional[BM25Tokenizer] = None):
        """
        Initialize BM25 index.

        Args:
            config: Configuration with BM25 parameters
            tokenizer: Tokenizer shared with query processing
        """
        self.config = config
        self.tokenizer = tokenizer or BM25Tokenizer()
        self.bm25: Optional[PassageBM25] = None

    def build(self, passages: Sequence[str]) -> "BM25Index":
        """
        Build statistics from a document's passages.

        Args:
            passages: Ordered passages of one document
        """
        if not passages:
            raise ValueError("Cannot build index from empty passage list")

        tokenized_corpus = [self.tokenizer.tokenize(passage) for passage in passages]
        self.bm25 = PassageBM25.from_config(tokenized_corpus, self.config)
        return self

    def get_scores(self, query_terms: Sequence[str]) -> List[float]:
        """
        Score all passages against query terms.

        Returns:
            One score per passage, in passage order
        """
        if self.bm25 is None:
            raise ValueError("Index not built. Call build() first.")

        return self.bm25.get_scores(query_terms)


def score_passage(
    query_terms: Sequence[str],
    passage: str,
    sibling_passages: Sequence[str],
    config: Optional[Config] = None,
    tokenizer: Optional[BM25Tokenizer] = None,
) -> float:
    """
    Score a single passage against its sibling passages, without a prebuilt index.

    Produces the same value BM25Index.get_scores gives for that passage when
    the passage is one of the siblings.

    Args:
        query_terms: Tokenized query
        passage: Passage text to score
        sibling_passages: All passages of the owning document (corpus statistics)
        config: BM25 parameters (defaults if omitted)
        tokenizer: Tokenizer (default BM25Tokenizer if omitted)

    Returns:
        Non-negative relevance score
    """
    config = config or Config()
    tokenizer = tokenizer or BM25Tokenizer()

    # No siblings: the passage is its own corpus
    corpus = [tokenizer.tokenize(p) for p in sibling_passages or [passage]]
    bm25 = PassageBM25.from_config(corpus, config)
    return bm25.score_tokens(query_terms, tokenizer.tokenize(passage))
