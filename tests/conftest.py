"""Test configuration and fixtures."""

import random

import pytest

from research_assistant.container import Container
from research_assistant.domain.entities import DocumentUpload
from research_assistant.domain.repositories import LLMRepository
from research_assistant.domain.services import (
    AnswerService, BillingService, IngestionService, ReportService, SearchService
)
from research_assistant.infrastructure.readers import FileReader
from research_assistant.infrastructure.storage import InMemoryDocumentIndex, InMemoryReportRepository


AI_MARKET_SENTENCES = [
    "The artificial intelligence market grew quickly in 2023",
    "Analysts expect artificial intelligence spending to keep rising",
    "Vendors of artificial intelligence platforms reported record growth",
    "Artificial intelligence adoption is strongest in finance and healthcare",
    "Regulators are drafting rules for artificial intelligence systems",
    "The artificial intelligence market is projected to double by 2027",
    "Startups building artificial intelligence tools raised new funding",
    "Enterprise buyers rank artificial intelligence as a top priority",
    "Artificial intelligence chips remain in short supply across the market",
    "Training costs for artificial intelligence models continue to fall",
    "Cloud providers bundle artificial intelligence services with storage",
    "Artificial intelligence market growth depends on skilled engineers",
]

AI_MARKET_TEXT = ". ".join(AI_MARKET_SENTENCES) + "."

AI_MARKET_QUERY = "What is artificial intelligence market growth?"


class FixedRandom(random.Random):
    """Random source that always picks the first option and the lowest number."""

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return a


class MockLLMRepository(LLMRepository):
    """Mock implementation of LLMRepository for testing."""

    name = "Mock"

    def __init__(self, mock_response: str = "Mock LLM response"):
        self.mock_response = mock_response
        self.call_count = 0
        self.last_prompt = None

    def generate_answer(self, prompt: str, **kwargs) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        return self.mock_response

    def is_available(self) -> bool:
        return True


def make_upload(text: str, file_name: str = "notes.txt", size_bytes: int = 1024) -> DocumentUpload:
    return DocumentUpload(file_name=file_name, mime_type="text/plain", size_bytes=size_bytes, raw_text=text)


@pytest.fixture
def document_index():
    """Provide a fresh in-memory document index."""
    return InMemoryDocumentIndex()


@pytest.fixture
def ingestion_service(document_index):
    return IngestionService(document_index, file_reader=FileReader())


@pytest.fixture
def search_service(document_index):
    """Search service with a deterministic random source."""
    return SearchService(document_index, rng=FixedRandom())


@pytest.fixture
def report_service():
    return ReportService(InMemoryReportRepository())


@pytest.fixture
def billing_service():
    return BillingService(initial_credits=100)


@pytest.fixture
def mock_llm_repository():
    return MockLLMRepository()


@pytest.fixture
def answer_service(mock_llm_repository, document_index):
    return AnswerService(mock_llm_repository, document_index)


@pytest.fixture
def ai_document(ingestion_service):
    """The AI market research document, ingested."""
    return ingestion_service.ingest(
        make_upload(AI_MARKET_TEXT, file_name="AI_Market_Research_2024.pdf", size_bytes=2048576)
    )


@pytest.fixture
def test_container(mock_llm_repository):
    """Provide container with a mocked LLM and a fixed random source."""
    container = Container(llm_provider="gemini", seed=7, initial_credits=100)
    container._llm_repository = mock_llm_repository
    container._random = FixedRandom()
    return container
