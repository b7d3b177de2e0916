from __future__ import annotations
from typing import List, Sequence
import re

SENTENCES_PER_CHUNK = 3
MIN_CHUNK_LENGTH = 50

_NON_WORD = re.compile(r"[^\w\s]")
_SENTENCE_END = re.compile(r"[.!?]+")


def normalize(text: str) -> List[str]:
    """Lowercase words with punctuation replaced by whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def split_sentences(text: str) -> List[str]:
    # a run of terminators ends one sentence ("Wait?!" is one break)
    parts = _SENTENCE_END.split(text)
    return [p.strip() for p in parts if p.strip()]


def chunk_sentences(sentences: Sequence[str]) -> List[str]:
    """Group sentences into consecutive windows of three.

    Each window is joined with ``". "`` and closed with a period. Windows
    of ``MIN_CHUNK_LENGTH`` characters or fewer are not citable and are
    dropped; the rest keep their source order.
    """
    chunks: List[str] = []
    for start in range(0, len(sentences), SENTENCES_PER_CHUNK):
        window = sentences[start:start + SENTENCES_PER_CHUNK]
        chunk = ". ".join(window).strip() + "."
        if len(chunk) > MIN_CHUNK_LENGTH:
            chunks.append(chunk)
    return chunks


def chunk_text(text: str) -> List[str]:
    return chunk_sentences(split_sentences(text))
