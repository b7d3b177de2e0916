"""Domain entities for documents and search results."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class DocumentUpload:
    """What the file-reading collaborator hands to ingestion."""
    file_name: str
    mime_type: str
    size_bytes: int
    raw_text: str


@dataclass(frozen=True)
class DocumentMetadata:
    """Derived statistics of a document."""
    page_count: int
    word_count: int
    key_terms: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.page_count < 1:
            raise ValueError("Page count must be at least 1")
        if len(self.key_terms) > 10:
            raise ValueError("At most 10 key terms are kept")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageCount": self.page_count,
            "wordCount": self.word_count,
            "keyTerms": list(self.key_terms),
        }


@dataclass(frozen=True)
class Document:
    """An ingested document. Immutable once stored in the index."""
    id: int
    name: str
    raw_content: str
    chunks: Tuple[str, ...]
    metadata: DocumentMetadata
    mime_type: str = "text/plain"
    size_bytes: int = 0
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.id < 1:
            raise ValueError("Document ID must be a positive integer")
        if not self.name:
            raise ValueError("Document name cannot be empty")

    def summary(self) -> Dict[str, Any]:
        """Listing view without the raw content and chunk text."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.mime_type,
            "size": self.size_bytes,
            "uploadedAt": self.uploaded_at.isoformat(),
            "chunkCount": len(self.chunks),
            "metadata": self.metadata.to_dict(),
        }

    def to_dict(self) -> Dict[str, Any]:
        data = self.summary()
        data["content"] = self.raw_content
        data["chunks"] = list(self.chunks)
        return data


class ResultType(Enum):
    """Where a search result came from."""
    DOCUMENT = "document"
    LIVE = "live"


@dataclass(frozen=True)
class SearchResult:
    """A citable search hit, either from a document or a live source."""
    id: int
    title: str
    snippet: str
    source: str
    type: ResultType
    relevance: float
    citations: Tuple[str, ...]
    document_id: Optional[int] = None
    page_number: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0 <= self.relevance <= 1:
            raise ValueError("Relevance must be between 0 and 1")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "snippet": self.snippet,
            "source": self.source,
            "type": self.type.value,
            "relevance": self.relevance,
            "citations": list(self.citations),
        }
        if self.document_id is not None:
            data["documentId"] = self.document_id
        if self.page_number is not None:
            data["pageNumber"] = self.page_number
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        return cls(
            id=int(data["id"]),
            title=data["title"],
            snippet=data["snippet"],
            source=data["source"],
            type=ResultType(data["type"]),
            relevance=float(data["relevance"]),
            citations=tuple(data.get("citations", ())),
            document_id=data.get("documentId"),
            page_number=data.get("pageNumber"),
        )
