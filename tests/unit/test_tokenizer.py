"""
Tests for BM25 tokenization.
"""

from helpdesk_rag.search.tokenizer import BM25Tokenizer


def test_lowercases_and_strips_punctuation():
    """Punctuation becomes a separator and terms are lowercased."""
    tokenizer = BM25Tokenizer()
    assert tokenizer.tokenize("Hello, World!") == ["hello", "world"]
    assert tokenizer.tokenize("- Cost: $0/month") == ["cost", "0", "month"]
    assert tokenizer.tokenize("30-Day Guarantee") == ["30", "day", "guarantee"]


def test_underscore_is_a_separator():
    """Only letters and digits form terms."""
    tokenizer = BM25Tokenizer()
    assert tokenizer.tokenize("reset_password flow") == ["reset", "password", "flow"]


def test_empty_and_whitespace_input():
    """Empty, whitespace-only and punctuation-only input yield no terms."""
    tokenizer = BM25Tokenizer()
    assert tokenizer.tokenize("") == []
    assert tokenizer.tokenize("   \n\t ") == []
    assert tokenizer.tokenize("?!... ---") == []


def test_non_ascii_letters_are_kept():
    """Letters outside ASCII stay part of their term."""
    tokenizer = BM25Tokenizer()
    assert tokenizer.tokenize("Café Menü") == ["café", "menü"]


def test_query_tokenization_matches_text_tokenization():
    """Queries and passages share one tokenization."""
    tokenizer = BM25Tokenizer()
    text = "Refund Policy: 30 days!"
    assert tokenizer.tokenize_query(text) == tokenizer.tokenize(text)
