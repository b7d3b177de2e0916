"""Term-frequency relevance scoring."""

import string
from typing import Iterable, List

QUERY_TERM_MIN_LENGTH = 3
OCCURRENCE_CAP = 10


def query_terms(query: str) -> List[str]:
    """Split a query into lowercase search terms.

    Tokens are whitespace separated, lose surrounding punctuation and must
    be at least ``QUERY_TERM_MIN_LENGTH`` characters long. Repeats are
    dropped so each term counts once; the first occurrence fixes the order.
    """
    terms: List[str] = []
    for token in query.lower().split():
        token = token.strip(string.punctuation)
        if len(token) >= QUERY_TERM_MIN_LENGTH and token not in terms:
            terms.append(token)
    return terms


def mentions_any(terms: Iterable[str], text: str) -> bool:
    """True when any term occurs in ``text`` as a case-insensitive substring."""
    text_lower = text.lower()
    return any(term and term in text_lower for term in terms)


def score(terms: Iterable[str], text: str) -> float:
    """Relevance of ``text`` to ``terms`` in [0, 1].

    Every term contributes its occurrence count divided by
    ``OCCURRENCE_CAP``, capped at 1.0; occurrences are substring matches,
    so "market" also counts inside "marketing". The result is the mean
    contribution. No terms scores 0.0.
    """
    unique = [t for t in dict.fromkeys(terms) if t]
    if not unique:
        return 0.0
    text_lower = text.lower()
    total = sum(min(text_lower.count(term) / OCCURRENCE_CAP, 1.0) for term in unique)
    return min(total / len(unique), 1.0)
