"""
Integration tests: load a support corpus and search it.
"""

import pytest

from helpdesk_rag import Config, RetrievalEngine
from helpdesk_rag.storage import DirectorySource

PRICING = "# Pricing Plans\n\n## Free Tier\n- Cost: $0/month\n- Features: Basic support"
REFUNDS = "# Refund Policy\n\n## 30-Day Guarantee\nWe offer refunds within 30 days"


class MemorySource:
    """In-memory corpus provider."""

    def __init__(self, files):
        self.files = dict(files)

    def list_names(self):
        return list(self.files)

    def read_bytes(self, name):
        return self.files[name].encode("utf-8")


@pytest.fixture
def engine():
    return RetrievalEngine(MemorySource({"pricing.md": PRICING, "refunds.md": REFUNDS}))


def test_documents_are_loaded(engine):
    """Both documents load in listing order with their passages."""
    assert engine.ready
    assert engine.get_document_count() == 2
    assert engine.get_filenames() == ["pricing.md", "refunds.md"]
    assert engine.get_document("pricing.md").passages == (
        "# Pricing Plans",
        "## Free Tier\n- Cost: $0/month\n- Features: Basic support",
    )
    assert [d.id for d in engine.get_all_documents()] == ["pricing", "refunds"]


def test_get_document_not_found(engine):
    assert engine.get_document("nonexistent.md") is None


def test_pricing_query(engine):
    """A pricing question ranks the pricing document first."""
    results = engine.search("pricing plans cost", 3)

    assert results[0].document.filename == "pricing.md"
    assert results[0].score > 0
    assert not engine.is_fallback(results[0])


def test_refund_query(engine):
    """A refund question ranks the refund document first."""
    results = engine.search("refund policy 30 days", 3)

    assert results[0].document.filename == "refunds.md"
    assert results[0].score > 0


def test_unrelated_query_falls_back(engine):
    """Queries matching nothing get the leading passages with the fallback score."""
    results = engine.search("completely unrelated topic", 3)

    assert [(r.document.filename, r.passage_index) for r in results] == [
        ("pricing.md", 0),
        ("pricing.md", 1),
        ("refunds.md", 0),
    ]
    assert all(r.score == 0.01 for r in results)
    assert all(engine.is_fallback(r) for r in results)


def test_top_k_is_respected(engine):
    assert len(engine.search("pricing", 1)) == 1
    for k in (1, 2, 3, 10):
        assert len(engine.search("support refund pricing days", k)) <= k
        assert len(engine.search("hello", k)) <= k


def test_default_top_k(engine):
    """Omitting top_k uses the configured default."""
    assert len(engine.search("hello")) == 3


def test_invalid_top_k(engine):
    with pytest.raises(ValueError):
        engine.search("pricing", 0)


def test_empty_queries_return_nothing(engine):
    """Queries without terms never fall back."""
    assert engine.search("", 3) == []
    assert engine.search("   ", 3) == []
    assert engine.search("?!", 3) == []


def test_special_characters_in_query(engine):
    results = engine.search("pricing & costs!", 3)
    assert results[0].document.filename == "pricing.md"


def test_scores_are_sorted(engine):
    for query in ("pricing cost", "refund support days", "free tier 30 days"):
        results = engine.search(query, 10)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)


def test_ties_keep_document_then_passage_order():
    """Equal scores keep encounter order."""
    engine = RetrievalEngine(
        MemorySource({"b.md": "alpha\n\nbeta", "a.md": "alpha\n\nbeta"})
    )
    results = engine.search("alpha", 5)

    assert [r.document.filename for r in results] == ["b.md", "a.md"]
    assert results[0].score == results[1].score


def test_search_is_deterministic(engine):
    assert engine.search("refund pricing", 3) == engine.search("refund pricing", 3)


def test_results_point_at_their_passages(engine):
    """Every result's passage is the document passage at its index."""
    for query in ("pricing plans", "refunds", "hello world"):
        for r in engine.search(query, 10):
            assert r.document.passages[r.passage_index] == r.passage


def test_fallback_takes_two_passages_per_document():
    """Fallback takes at most two leading passages from each document."""
    engine = RetrievalEngine(
        MemorySource({"guide.md": "one\n\ntwo\n\nthree", "faq.md": "four"})
    )
    results = engine.search("zebra", 10)

    assert [r.passage for r in results] == ["one", "two", "four"]


def test_fallback_breadth_is_configurable():
    engine = RetrievalEngine(
        MemorySource({"guide.md": "one\n\ntwo\n\nthree"}),
        Config(fallback_passages_per_document=1),
    )
    assert [r.passage for r in engine.search("zebra", 10)] == ["one"]


def test_empty_corpus(tmp_path):
    """An empty corpus is ready and returns nothing, not even fallback."""
    engine = RetrievalEngine.from_directory(tmp_path)

    assert engine.ready
    assert engine.get_document_count() == 0
    assert engine.search("pricing", 3) == []


class FlakySource(MemorySource):
    """Provider whose reads fail for one source."""

    def read_bytes(self, name):
        if name == "broken.md":
            raise RuntimeError("storage backend unavailable")
        return super().read_bytes(name)


def test_provider_read_failure_does_not_block_ready():
    """A provider raising on one read still yields a ready engine with the rest."""
    engine = RetrievalEngine(
        FlakySource({"broken.md": "x", "pricing.md": PRICING, "refunds.md": REFUNDS})
    )

    assert engine.ready
    assert engine.get_filenames() == ["pricing.md", "refunds.md"]
    assert [e.name for e in engine.load_errors] == ["broken.md"]


def test_missing_directory_is_ready_and_empty(tmp_path):
    engine = RetrievalEngine.from_directory(tmp_path / "missing")

    assert engine.ready
    assert engine.get_document_count() == 0
    assert len(engine.load_errors) == 1


def test_blank_document_is_never_returned():
    """A blank document is stored but never returned."""
    engine = RetrievalEngine(MemorySource({"blank.md": "  \n\n", "faq.md": "pricing"}))

    assert engine.get_document_count() == 2
    assert [r.document.filename for r in engine.search("zebra", 5)] == ["faq.md"]
    assert [r.document.filename for r in engine.search("pricing", 5)] == ["faq.md"]


def test_unloaded_engine_is_unready():
    """An engine created without loading answers nothing until reindexed."""
    engine = RetrievalEngine(MemorySource({"pricing.md": PRICING}), load=False)

    assert not engine.ready
    assert engine.search("pricing", 3) == []
    assert engine.get_document_count() == 0

    engine.reindex()

    assert engine.ready
    assert engine.search("pricing", 3)[0].document.filename == "pricing.md"


def test_directory_corpus(tmp_path):
    """Engines built from a directory load .md and .txt files only."""
    (tmp_path / "pricing.md").write_text(PRICING)
    (tmp_path / "refunds.txt").write_text(REFUNDS)
    (tmp_path / "logo.png").write_bytes(b"\x89PNG")

    engine = RetrievalEngine.from_directory(tmp_path)

    assert engine.get_filenames() == ["pricing.md", "refunds.txt"]
    assert isinstance(engine.source, DirectorySource)
