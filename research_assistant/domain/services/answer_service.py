"""Answer domain service: asks an LLM a question about one document."""

from typing import List, Optional

from ..entities import SearchResult, ResultType
from ..repositories import DocumentRepository, LLMRepository
from ...exceptions import DocumentNotFoundError, ValidationError
from ...logging_config import get_logger

logger = get_logger(__name__)


class AnswerService:
    """Pass-through to the configured LLM, shaped as a search result."""

    def __init__(self, llm_repository: LLMRepository, document_repository: DocumentRepository):
        self._llm_repo = llm_repository
        self._document_repo = document_repository

    def ask(self, query: str, document_id: Optional[int]) -> List[SearchResult]:
        if not query or not query.strip() or document_id is None:
            raise ValidationError(
                message="Missing query or documentId",
                details={"query": query, "document_id": document_id}
            )

        document = self._document_repo.get(document_id)
        if document is None:
            raise DocumentNotFoundError(
                message=f"Document {document_id} not found",
                details={"document_id": document_id}
            )

        logger.info(f"Asking {self._llm_repo.name} about document {document_id}")
        answer = self._llm_repo.generate_answer(self._build_prompt(query.strip(), document.raw_content))

        provider = self._llm_repo.name
        return [SearchResult(
            id=1,
            title=f"{provider} Research Result",
            snippet=answer,
            source=provider,
            type=ResultType.DOCUMENT,
            relevance=1.0,
            citations=(f"{provider} API",),
            document_id=document.id,
            page_number=1,
        )]

    def _build_prompt(self, question: str, content: str) -> str:
        return f"Document: {content}\nQuestion: {question}"
