"""Test cases for the HTTP API."""

import logging

import pytest
from fastapi.testclient import TestClient

from research_assistant.api import create_app
from research_assistant.exceptions import LLMError
from research_assistant.infrastructure.readers import FileReader
from tests.conftest import AI_MARKET_QUERY, AI_MARKET_TEXT


@pytest.fixture
def client(test_container):
    """Create test client around an isolated container."""
    return TestClient(create_app(test_container))


def _upload(client, text=AI_MARKET_TEXT, name="AI_Market_Research_2024.txt", content_type="text/plain"):
    return client.post("/documents", files={"file": (name, text.encode("utf-8"), content_type)})


class TestBasics:
    """Health, info and root endpoints."""

    def test_health_endpoint(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_info_endpoint(self, client):
        _upload(client)
        data = client.get("/info").json()

        assert data["documents"] == 1
        assert data["reports"] == 0
        assert data["llm"]["provider"] == "gemini"
        assert "configured" in data["llm"]

    def test_root_lists_endpoints(self, client):
        assert "POST /research/search" in client.get("/").json()["endpoints"]


class TestDocumentEndpoints:
    """Upload, list, fetch and delete documents."""

    def test_upload(self, client):
        response = _upload(client)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "AI_Market_Research_2024.txt"
        assert data["chunkCount"] == 4
        assert data["metadata"]["pageCount"] == 1
        assert "artificial" in data["metadata"]["keyTerms"]
        assert "content" not in data

    def test_unsupported_upload(self, client):
        response = _upload(client, name="tool.exe", content_type="application/octet-stream")

        assert response.status_code == 422
        assert response.json()["error"] == "FileReadError"

    def test_oversized_upload_read_is_bounded(self, test_container):
        """Only one byte past the limit is read before the upload is rejected."""
        test_container._file_reader = FileReader(max_bytes=100)
        client = TestClient(create_app(test_container))

        response = _upload(client, text="x" * 5000)

        assert response.status_code == 400
        assert response.json()["details"]["size_bytes"] == 101
        assert client.get("/documents").json() == []

    def test_empty_upload(self, client):
        response = _upload(client, text="   ")

        assert response.status_code == 422
        assert client.get("/documents").json() == []

    def test_list_and_get(self, client):
        _upload(client)
        _upload(client, name="second.txt")

        assert [d["id"] for d in client.get("/documents").json()] == [1, 2]
        document = client.get("/documents/2").json()
        assert document["content"] == AI_MARKET_TEXT
        assert len(document["chunks"]) == 4

    def test_get_missing(self, client):
        response = client.get("/documents/99")

        assert response.status_code == 404
        assert response.json()["error"] == "DocumentNotFoundError"

    def test_delete(self, client):
        _upload(client)

        assert client.delete("/documents/1").json() == {"deleted": 1}
        assert client.delete("/documents/1").status_code == 404


class TestResearchEndpoints:
    """Search and ask."""

    def test_search(self, client):
        _upload(client)
        response = client.post("/research/search", json={"query": AI_MARKET_QUERY, "documentIds": [1]})

        assert response.status_code == 200
        data = response.json()
        assert data["credits"] == 95
        results = data["results"]
        assert len(results) == 4
        assert [r["type"] for r in results] == ["live", "live", "live", "document"]
        assert results[-1]["documentId"] == 1
        assert results[-1]["pageNumber"] == 1
        assert results[-1]["relevance"] == pytest.approx(0.52)

    def test_search_log_preview(self, client, caplog):
        """Short queries are logged whole, long ones cut at 50 characters."""
        long_query = "market " * 20
        with caplog.at_level(logging.INFO, logger="research_assistant.api"):
            client.post("/research/search", json={"query": "market growth"})
            client.post("/research/search", json={"query": long_query})

        messages = [r.getMessage() for r in caplog.records if r.name == "research_assistant.api"]
        assert "Search request: market growth (documents=None)" in messages
        assert f"Search request: {long_query[:50]}... (documents=None)" in messages

    def test_search_defaults_to_all_documents(self, client):
        _upload(client)
        results = client.post("/research/search", json={"query": AI_MARKET_QUERY}).json()["results"]

        assert any(r["type"] == "document" for r in results)

    def test_search_unknown_document(self, client):
        response = client.post("/research/search", json={"query": AI_MARKET_QUERY, "documentIds": [42]})

        assert response.status_code == 200
        assert all(r["type"] == "live" for r in response.json()["results"])

    def test_search_requires_query(self, client):
        response = client.post("/research/search", json={"query": "  "})

        assert response.status_code == 400
        assert client.get("/billing").json()["credits"] == 100

    def test_ask(self, client, mock_llm_repository):
        _upload(client)
        response = client.post("/research/ask", json={"query": "What drives growth?", "documentId": 1})

        assert response.status_code == 200
        result = response.json()["results"][0]
        assert result["snippet"] == "Mock LLM response"
        assert result["citations"] == ["Mock API"]
        assert mock_llm_repository.call_count == 1

    def test_ask_missing_fields(self, client):
        response = client.post("/research/ask", json={"query": "What drives growth?"})

        assert response.status_code == 400
        assert response.json()["message"] == "Missing query or documentId"

    def test_ask_unknown_document(self, client):
        response = client.post("/research/ask", json={"query": "What drives growth?", "documentId": 9})
        assert response.status_code == 404

    def test_ask_llm_failure(self, client, mock_llm_repository, monkeypatch):
        def fail(prompt, **kwargs):
            raise LLMError("Gemini API error: 500", details={"status_code": 500})

        monkeypatch.setattr(mock_llm_repository, "generate_answer", fail)
        _upload(client)
        response = client.post("/research/ask", json={"query": "What drives growth?", "documentId": 1})

        assert response.status_code == 502
        assert response.json()["details"] == {"status_code": 500}


class TestReportEndpoints:
    """Save, list, export and delete reports."""

    def _create(self, client, title=None):
        _upload(client)
        results = client.post("/research/search", json={"query": AI_MARKET_QUERY}).json()["results"]
        return client.post("/reports", json={"query": AI_MARKET_QUERY, "results": results, "title": title})

    def test_create(self, client):
        response = self._create(client)

        assert response.status_code == 201
        report = response.json()
        assert report["title"] == f"Research Report: {AI_MARKET_QUERY}"
        assert report["status"] == "completed"
        assert len(report["results"]) == 4

    def test_list_search_and_get(self, client):
        report_id = self._create(client, title="Market study").json()["id"]

        assert [r["id"] for r in client.get("/reports").json()] == [report_id]
        assert client.get("/reports", params={"q": "market study"}).json()[0]["id"] == report_id
        assert client.get("/reports", params={"q": "volcano"}).json() == []
        assert client.get(f"/reports/{report_id}").json()["title"] == "Market study"

    def test_export(self, client):
        report_id = self._create(client).json()["id"]
        response = client.get(f"/reports/{report_id}/export")

        assert response.status_code == 200
        assert response.text.startswith("# Research Report:")
        assert "- Relevance: 92%" in response.text

    def test_missing_report(self, client):
        assert client.get("/reports/7").status_code == 404
        assert client.get("/reports/7/export").status_code == 404
        assert client.delete("/reports/7").status_code == 404

    def test_delete(self, client):
        report_id = self._create(client).json()["id"]

        assert client.delete(f"/reports/{report_id}").json() == {"deleted": report_id}
        assert client.get("/reports").json() == []

    def test_invalid_result_rejected(self, client):
        bad = {"id": 1, "title": "t", "snippet": "s", "source": "x", "type": "rumour", "relevance": 0.5}
        response = client.post("/reports", json={"query": "growth", "results": [bad]})

        assert response.status_code == 422


class TestBillingEndpoints:
    """Credit balance and purchases."""

    def test_search_and_report_charges(self, client):
        _upload(client)
        results = client.post("/research/search", json={"query": AI_MARKET_QUERY}).json()["results"]
        client.post("/reports", json={"query": AI_MARKET_QUERY, "results": results})

        data = client.get("/billing").json()
        assert data["credits"] == 85
        assert data["usage"]["totalQueries"] == 1
        assert data["usage"]["totalReports"] == 1
        assert [t["credits"] for t in data["history"]] == [-10, -5]

    def test_add_credits(self, client):
        response = client.post("/billing/credits", json={"amount": 500, "description": "Professional Package"})

        assert response.json() == {"credits": 600}
        assert client.get("/billing").json()["history"][0]["description"] == "Professional Package"

    def test_non_positive_credits(self, client):
        assert client.post("/billing/credits", json={"amount": 0}).status_code == 422
