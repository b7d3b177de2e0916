"""Ingestion domain service: turns uploaded text into an indexed Document."""

from typing import List, Optional

from ..entities import Document, DocumentMetadata, DocumentUpload
from ..repositories import DocumentRepository
from .key_terms import extract_key_terms
from ...chunking import chunk_text
from ...error_handler import handle_errors
from ...exceptions import ChunkingError, FileReadError, ValidationError
from ...logging_config import get_logger

logger = get_logger(__name__)

# Rough page estimate until real pagination is extracted
BYTES_PER_PAGE = 50000


def estimate_page_count(size_bytes: int) -> int:
    return max(size_bytes, 0) // BYTES_PER_PAGE + 1


class IngestionService:
    """Domain service for document ingestion.

    A document only becomes visible in the index once it is completely
    built; a failure at any step leaves the index untouched.
    """

    def __init__(self, document_repository: DocumentRepository, file_reader=None):
        self._document_repo = document_repository
        self._file_reader = file_reader

    def ingest(self, upload: DocumentUpload) -> Document:
        """Build and index a document from already extracted text."""
        if not upload.file_name or not upload.file_name.strip():
            raise ValidationError(message="File name cannot be empty")
        if not upload.raw_text or not upload.raw_text.strip():
            raise FileReadError(
                message=f"No text could be extracted from {upload.file_name}",
                details={"file_name": upload.file_name, "mime_type": upload.mime_type}
            )

        document = self._build_document(upload)
        self._document_repo.put(document)
        logger.info(
            f"Ingested document {document.id} ({document.name}): "
            f"{len(document.chunks)} chunks, {document.metadata.page_count} pages"
        )
        return document

    def ingest_bytes(self, data: bytes, file_name: str, mime_type: str = "") -> Document:
        """Extract text with the file reader, then ingest."""
        return self.ingest(self._reader().read_bytes(data, file_name, mime_type))

    def ingest_file(self, path: str) -> Document:
        return self.ingest(self._reader().read_path(path))

    def get(self, document_id: int) -> Optional[Document]:
        return self._document_repo.get(document_id)

    def list(self) -> List[Document]:
        return self._document_repo.all()

    def delete(self, document_id: int) -> bool:
        deleted = self._document_repo.delete(document_id)
        if deleted:
            logger.info(f"Deleted document {document_id}")
        return deleted

    def _reader(self):
        if self._file_reader is None:
            raise FileReadError(message="No file reader configured for ingestion")
        return self._file_reader

    @handle_errors(exception_type=ChunkingError)
    def _build_document(self, upload: DocumentUpload) -> Document:
        text = upload.raw_text
        metadata = DocumentMetadata(
            page_count=estimate_page_count(upload.size_bytes),
            word_count=len(text.split()),
            key_terms=tuple(extract_key_terms(text)),
        )
        return Document(
            id=self._document_repo.next_id(),
            name=upload.file_name,
            raw_content=text,
            chunks=tuple(chunk_text(text)),
            metadata=metadata,
            mime_type=upload.mime_type or "text/plain",
            size_bytes=upload.size_bytes,
        )
