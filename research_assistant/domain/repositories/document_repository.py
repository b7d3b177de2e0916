"""Document index interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Document


class DocumentRepository(ABC):
    """Abstract interface for the in-process document index."""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve a fresh, never reused document ID."""
        pass

    @abstractmethod
    def put(self, document: Document) -> None:
        """Store a fully built document."""
        pass

    @abstractmethod
    def get(self, document_id: int) -> Optional[Document]:
        """Get document by ID, or None when absent."""
        pass

    @abstractmethod
    def all(self) -> List[Document]:
        """All documents in insertion order."""
        pass

    @abstractmethod
    def delete(self, document_id: int) -> bool:
        """Delete document and return whether it existed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of indexed documents."""
        pass
