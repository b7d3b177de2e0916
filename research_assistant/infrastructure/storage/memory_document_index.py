"""In-memory document index."""

import itertools
import threading
from typing import Dict, List, Optional

from ...domain.entities import Document
from ...domain.repositories import DocumentRepository
from ...exceptions import DocumentProcessingError
from ...logging_config import get_logger

logger = get_logger(__name__)


class InMemoryDocumentIndex(DocumentRepository):
    """Dictionary-backed implementation of DocumentRepository.

    Writers serialize on a lock; readers never take it. Documents are
    immutable, so a reader sees either the whole document or nothing.
    Contents are lost when the process exits.
    """

    def __init__(self):
        self._documents: Dict[int, Document] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def put(self, document: Document) -> None:
        with self._lock:
            if document.id in self._documents:
                raise DocumentProcessingError(
                    message=f"Document {document.id} is already indexed",
                    details={"document_id": document.id}
                )
            # copy-on-write so concurrent readers iterate a stable dict
            documents = dict(self._documents)
            documents[document.id] = document
            self._documents = documents

    def get(self, document_id: int) -> Optional[Document]:
        return self._documents.get(document_id)

    def all(self) -> List[Document]:
        return list(self._documents.values())

    def delete(self, document_id: int) -> bool:
        with self._lock:
            if document_id not in self._documents:
                return False
            documents = dict(self._documents)
            del documents[document_id]
            self._documents = documents
        return True

    def count(self) -> int:
        return len(self._documents)
