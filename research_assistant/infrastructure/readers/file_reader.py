"""File reading: extracts plain text from uploaded files."""

import io
import mimetypes
import os
from typing import Optional

import PyPDF2
import docx  # python-docx

from ...domain.entities import DocumentUpload
from ...error_handler import handle_errors
from ...exceptions import FileReadError, ValidationError
from ...logging_config import get_logger

logger = get_logger(__name__)

TEXT_EXT = {".txt", ".md", ".csv", ".tsv"}
SUPPORTED_EXT = TEXT_EXT | {".pdf", ".docx"}


def sniff_is_pdf(data: bytes) -> bool:
    return data[:5] == b'%PDF-'


@handle_errors(exception_type=FileReadError)
def _read_pdf(data: bytes) -> str:
    """Extract text from PDF bytes."""
    reader = PyPDF2.PdfReader(io.BytesIO(data))
    if getattr(reader, 'is_encrypted', False):
        reader.decrypt("")
    return "\n".join(page.extract_text() or "" for page in reader.pages)


@handle_errors(exception_type=FileReadError)
def _read_docx(data: bytes) -> str:
    """Extract text from DOCX bytes."""
    d = docx.Document(io.BytesIO(data))
    return "\n".join(p.text for p in d.paragraphs)


def _read_text(data: bytes) -> str:
    return data.decode('utf-8', errors='ignore')


class FileReader:
    """Turns raw file bytes into a DocumentUpload for ingestion."""

    def __init__(self, max_bytes: Optional[int] = None):
        self.max_bytes = max_bytes

    def read_path(self, path: str) -> DocumentUpload:
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise FileReadError(
                message=f"Cannot open {path}: {e}",
                details={"path": path}
            ) from e
        mime_type = mimetypes.guess_type(path)[0] or ""
        return self.read_bytes(data, os.path.basename(path), mime_type)

    def read_bytes(self, data: bytes, file_name: str, mime_type: str = "") -> DocumentUpload:
        if self.max_bytes is not None and len(data) > self.max_bytes:
            raise ValidationError(
                message=f"{file_name} exceeds the {self.max_bytes} byte upload limit",
                details={"file_name": file_name, "size_bytes": len(data)}
            )

        ext = os.path.splitext(file_name)[1].lower()
        if ext == '.pdf' or sniff_is_pdf(data):
            text = _read_pdf(data)
        elif ext == '.docx':
            text = _read_docx(data)
        elif ext in TEXT_EXT or mime_type.startswith('text/'):
            text = _read_text(data)
        else:
            raise FileReadError(
                message=f"Unsupported file type: {ext or mime_type or 'unknown'}",
                details={"file_name": file_name, "supported": sorted(SUPPORTED_EXT)}
            )

        logger.info(f"Read {len(text)} characters from {file_name}")
        return DocumentUpload(
            file_name=file_name,
            mime_type=mime_type or mimetypes.guess_type(file_name)[0] or "application/octet-stream",
            size_bytes=len(data),
            raw_text=text,
        )
