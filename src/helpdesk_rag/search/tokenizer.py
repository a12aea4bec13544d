"""
BM25 tokenizer for Helpdesk RAG.

Tokenization is term-based: lowercase, punctuation becomes whitespace,
split on whitespace runs. Queries and passages go through the same path.
"""

import re
from typing import List

# Anything that is not a letter, digit or whitespace. \w also admits "_",
# which is punctuation here.
NON_TERM_CHARS_RE = re.compile(r"[^\w\s]|_")


class BM25Tokenizer:
    """Word-based tokenizer for BM25."""

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text for BM25.

        - Lowercase
        - Replace every non letter/digit/whitespace character with a space
        - Split on whitespace runs, dropping empty tokens

        Args:
            text: Text to tokenize

        Returns:
            List of tokens (empty for empty or whitespace-only input)
        """
        text_lower = text.lower()
        return NON_TERM_CHARS_RE.sub(" ", text_lower).split()

    def tokenize_query(self, query: str) -> List[str]:
        """
        Tokenize a query (same as tokenize, but kept separate for clarity).

        Args:
            query: Query string

        Returns:
            List of tokens
        """
        return self.tokenize(query)
