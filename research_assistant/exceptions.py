"""Custom exceptions for the research assistant."""

from typing import Optional


class ResearchAssistantError(Exception):
    """Base exception for all research assistant errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(ResearchAssistantError):
    """Raised when a request is missing a query or a document reference."""
    pass


class DocumentProcessingError(ResearchAssistantError):
    """Raised when document ingestion fails."""
    pass


class FileReadError(DocumentProcessingError):
    """Raised when file reading fails."""
    pass


class ChunkingError(DocumentProcessingError):
    """Raised when text chunking fails."""
    pass


class DocumentNotFoundError(ResearchAssistantError):
    """Raised when a single required document is not in the index."""
    pass


class ReportError(ResearchAssistantError):
    """Raised when report operations fail."""
    pass


class LLMError(ResearchAssistantError):
    """Raised when LLM operations fail."""
    pass


class ConfigurationError(ResearchAssistantError):
    """Raised when configuration is invalid."""
    pass
