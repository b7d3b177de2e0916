"""Key-term extraction: a document's most frequent long words."""

from collections import Counter
from typing import List

from ...chunking import normalize

KEY_TERM_MIN_LENGTH = 5
MAX_KEY_TERMS = 10


def term_frequencies(text: str) -> Counter:
    """Count words of at least ``KEY_TERM_MIN_LENGTH`` characters in first-seen order."""
    return Counter(word for word in normalize(text) if len(word) >= KEY_TERM_MIN_LENGTH)


def extract_key_terms(text: str, limit: int = MAX_KEY_TERMS) -> List[str]:
    """Return up to ``limit`` terms by descending frequency.

    Equal counts keep the order in which the words first appear in the text.
    """
    return [word for word, _count in term_frequencies(text).most_common(limit)]
