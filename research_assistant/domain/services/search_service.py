"""Search domain service: ranks document passages and blends in live results."""

import random
import re
from typing import Iterable, List, Optional, Sequence

from ..entities import Document, SearchResult, ResultType
from ..repositories import DocumentRepository
from .live_results import generate_live_results
from .relevance import mentions_any, query_terms, score
from ...logging_config import get_logger

logger = get_logger(__name__)

MAX_RESULTS = 8
RELEVANCE_THRESHOLD = 0.3

# Snippet window around the first located query term
SNIPPET_LEAD = 50
SNIPPET_TAIL = 150
SNIPPET_FALLBACK_LENGTH = 200
SNIPPET_SEARCH_LIMIT = 300

TITLE_TEMPLATES = (
    "{term} Insights from {name}",
    "Key Findings: {term} in {name}",
    "{name} - {term} Overview",
    "Research Analysis: {term} Trends",
)

_EXTENSION = re.compile(r"\.[^/.]+$")


def rank_results(results: Iterable[SearchResult], limit: int = MAX_RESULTS) -> List[SearchResult]:
    """Sort by relevance, highest first, and keep the top ``limit``.

    The sort is stable, so equal relevances keep their input order.
    """
    return sorted(results, key=lambda r: r.relevance, reverse=True)[:limit]


def extract_snippet(chunk: str, terms: Sequence[str]) -> str:
    """Cut a window around the first query term found near the chunk start.

    Falls back to the first ``SNIPPET_FALLBACK_LENGTH`` characters when no
    term occurs within the first ``SNIPPET_SEARCH_LIMIT`` characters.
    Ellipses mark text cut off on either side.
    """
    chunk_lower = chunk.lower()
    for term in terms:
        index = chunk_lower.find(term)
        if term and index != -1 and index < SNIPPET_SEARCH_LIMIT:
            start = max(0, index - SNIPPET_LEAD)
            end = min(len(chunk), index + SNIPPET_TAIL)
            snippet = chunk[start:end]
            if start > 0:
                snippet = "..." + snippet
            if end < len(chunk):
                snippet = snippet + "..."
            return snippet
    return chunk[:SNIPPET_FALLBACK_LENGTH]


def build_title(file_name: str, terms: Sequence[str], rng: random.Random) -> str:
    base_name = _EXTENSION.sub("", file_name)
    term = next((t for t in terms if len(t) > 3), "analysis")
    template = rng.choice(TITLE_TEMPLATES)
    return template.format(term=term[:1].upper() + term[1:], name=base_name)


class SearchService:
    """Domain service for query-time ranking over the document index.

    ``rng`` drives the title template choice and the estimated page
    number. Pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, document_repository: DocumentRepository, rng: Optional[random.Random] = None):
        self._document_repo = document_repository
        self._rng = rng or random.Random()

    def search(self, query: str, document_ids: Sequence[int]) -> List[SearchResult]:
        """Rank the requested documents and live sources against ``query``.

        Unknown document IDs are skipped. At most ``MAX_RESULTS`` results
        are returned, by descending relevance.
        """
        terms = query_terms(query)
        results: List[SearchResult] = []

        for document_id in document_ids:
            document = self._document_repo.get(document_id)
            if document is None:
                logger.debug(f"Skipping document {document_id}: not in index")
                continue
            result = self._document_result(document, terms, len(results) + 1)
            if result is not None:
                results.append(result)

        document_hits = len(results)
        results.extend(generate_live_results(terms))
        ranked = rank_results(results)

        logger.info(
            f"Search '{query[:50]}': {len(terms)} terms, {len(document_ids)} documents, "
            f"{document_hits} document hits, {len(ranked)} results"
        )
        return ranked

    def _document_result(self, document: Document, terms: Sequence[str],
                         result_id: int) -> Optional[SearchResult]:
        relevant_chunks = [chunk for chunk in document.chunks if mentions_any(terms, chunk)]
        if not relevant_chunks:
            return None

        relevance = score(terms, " ".join(relevant_chunks))
        if relevance <= RELEVANCE_THRESHOLD:
            return None

        return SearchResult(
            id=result_id,
            title=build_title(document.name, terms, self._rng),
            snippet=extract_snippet(relevant_chunks[0], terms),
            source=document.name,
            type=ResultType.DOCUMENT,
            relevance=relevance,
            citations=(document.name,),
            document_id=document.id,
            page_number=self._rng.randint(1, document.metadata.page_count),
        )
