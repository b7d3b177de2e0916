"""Dependency injection container.

The container owns every piece of mutable state (document index, report
list, credit ledger). Build one per process, or one per test.
"""

import random
from typing import Optional

from .config import (
    GEMINI_API_KEY, INITIAL_CREDITS, LLM_PROVIDER, MAX_UPLOAD_BYTES,
    OPENAI_API_KEY, SEARCH_RANDOM_SEED
)
from .domain.repositories import DocumentRepository, LLMRepository, ReportRepository
from .domain.services import (
    AnswerService, BillingService, IngestionService, ReportService, SearchService
)
from .application.use_cases import ResearchUseCase
from .error_handler import validate_config
from .exceptions import ConfigurationError
from .infrastructure.llm import GeminiLLMClient, OpenAILLMClient
from .infrastructure.readers import FileReader
from .infrastructure.storage import InMemoryDocumentIndex, InMemoryReportRepository
from .logging_config import get_logger

logger = get_logger(__name__)


class Container:
    """Dependency injection container."""

    def __init__(self, llm_provider: str = LLM_PROVIDER, seed: Optional[int] = SEARCH_RANDOM_SEED,
                 initial_credits: int = INITIAL_CREDITS):
        self.llm_provider = llm_provider
        self.seed = seed
        self.initial_credits = initial_credits
        self.reset()

    def document_repository(self) -> DocumentRepository:
        if self._document_repository is None:
            logger.info("Creating InMemoryDocumentIndex")
            self._document_repository = InMemoryDocumentIndex()
        return self._document_repository

    def report_repository(self) -> ReportRepository:
        if self._report_repository is None:
            self._report_repository = InMemoryReportRepository()
        return self._report_repository

    def llm_repository(self) -> LLMRepository:
        if self._llm_repository is None:
            if self.llm_provider == "gemini":
                logger.info("Creating Gemini LLM client")
                self._llm_repository = GeminiLLMClient()
            elif self.llm_provider == "openai":
                logger.info("Creating OpenAI LLM client")
                self._llm_repository = OpenAILLMClient()
            else:
                raise ConfigurationError(
                    message=f"Unknown LLM provider: {self.llm_provider}",
                    details={"supported": ["gemini", "openai"]}
                )
        return self._llm_repository

    def file_reader(self) -> FileReader:
        if self._file_reader is None:
            self._file_reader = FileReader(max_bytes=MAX_UPLOAD_BYTES)
        return self._file_reader

    def random_source(self) -> random.Random:
        if self._random is None:
            self._random = random.Random(self.seed)
        return self._random

    def search_service(self) -> SearchService:
        if self._search_service is None:
            self._search_service = SearchService(
                document_repository=self.document_repository(),
                rng=self.random_source()
            )
        return self._search_service

    def ingestion_service(self) -> IngestionService:
        if self._ingestion_service is None:
            self._ingestion_service = IngestionService(
                document_repository=self.document_repository(),
                file_reader=self.file_reader()
            )
        return self._ingestion_service

    def report_service(self) -> ReportService:
        if self._report_service is None:
            self._report_service = ReportService(self.report_repository())
        return self._report_service

    def billing_service(self) -> BillingService:
        if self._billing_service is None:
            self._billing_service = BillingService(self.initial_credits)
        return self._billing_service

    def answer_service(self) -> AnswerService:
        if self._answer_service is None:
            self._answer_service = AnswerService(
                llm_repository=self.llm_repository(),
                document_repository=self.document_repository()
            )
        return self._answer_service

    def research_use_case(self) -> ResearchUseCase:
        if self._research_use_case is None:
            self._research_use_case = ResearchUseCase(
                search_service=self.search_service(),
                report_service=self.report_service(),
                billing_service=self.billing_service(),
                document_repository=self.document_repository()
            )
        return self._research_use_case

    def check_llm_config(self) -> None:
        """Raise ConfigurationError when the chosen provider has no key."""
        keys = {"gemini": {"GEMINI_API_KEY": GEMINI_API_KEY},
                "openai": {"OPENAI_API_KEY": OPENAI_API_KEY}}
        config = keys.get(self.llm_provider, {})
        validate_config(config, list(config), context=f"{self.llm_provider} LLM")

    def reset(self):
        """Drop all instances, including stored documents, reports and credits."""
        self._document_repository: Optional[DocumentRepository] = None
        self._report_repository: Optional[ReportRepository] = None
        self._llm_repository: Optional[LLMRepository] = None
        self._file_reader: Optional[FileReader] = None
        self._random: Optional[random.Random] = None
        self._search_service: Optional[SearchService] = None
        self._ingestion_service: Optional[IngestionService] = None
        self._report_service: Optional[ReportService] = None
        self._billing_service: Optional[BillingService] = None
        self._answer_service: Optional[AnswerService] = None
        self._research_use_case: Optional[ResearchUseCase] = None
