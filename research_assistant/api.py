"""FastAPI backend for the research assistant.

Endpoints:
  POST /documents            -> upload a file, returns the document summary
  GET  /documents            -> list document summaries
  POST /research/search      -> JSON {query, documentIds?} returns ranked results
  POST /research/ask         -> JSON {query, documentId} asks the LLM about one document
  POST /reports              -> JSON {query, results, title?} saves a report
  GET  /billing              -> credit balance, usage and history
  GET  /health               -> {'status': 'ok'}
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, HTTPException, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from . import __version__
from .config import API_HOST, API_PORT, FRONTEND_PORT
from .container import Container
from .domain.entities import SearchResult
from .error_handler import log_error, safe_execute
from .exceptions import (
    ConfigurationError, DocumentNotFoundError, DocumentProcessingError,
    LLMError, ReportError, ResearchAssistantError, ValidationError
)
from .logging_config import get_logger

logger = get_logger(__name__)


class SearchRequest(BaseModel):
    query: str = ""
    documentIds: Optional[List[int]] = None


class AskRequest(BaseModel):
    query: str = ""
    documentId: Optional[int] = None


class SearchResultModel(BaseModel):
    id: int
    title: str
    snippet: str
    source: str
    type: str = Field(pattern="^(document|live)$")
    relevance: float = Field(ge=0, le=1)
    citations: List[str] = []
    documentId: Optional[int] = None
    pageNumber: Optional[int] = None


class ReportRequest(BaseModel):
    query: str = ""
    results: List[SearchResultModel] = []
    title: Optional[str] = None


class CreditsRequest(BaseModel):
    amount: int = Field(gt=0)
    description: str = "Credit purchase"


def _status_for(exc: ResearchAssistantError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, DocumentNotFoundError):
        return 404
    if isinstance(exc, ReportError) and exc.error_code == "ReportNotFound":
        return 404
    if isinstance(exc, DocumentProcessingError):
        return 422
    if isinstance(exc, LLMError):
        return 502  # Bad Gateway
    if isinstance(exc, ConfigurationError):
        return 503
    return 500


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the API around one container; each app owns its own state."""
    container = container or Container()
    app = FastAPI(title="Research Assistant", version=__version__)
    app.state.container = container

    @app.exception_handler(ResearchAssistantError)
    async def research_assistant_exception_handler(request: Request, exc: ResearchAssistantError):
        status_code = _status_for(exc)
        if status_code >= 500:
            log_error(exc, f"API error in {request.url.path}")
        else:
            logger.info(f"{request.url.path} rejected: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.details
            }
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            f"http://127.0.0.1:{FRONTEND_PORT}",
            f"http://localhost:{FRONTEND_PORT}",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/info")
    def info() -> Dict[str, Any]:
        llm_configured = safe_execute(
            lambda: container.check_llm_config() or True,
            "LLM configuration check",
            default_return=False
        )
        return {
            "version": __version__,
            "documents": container.document_repository().count(),
            "reports": len(container.report_repository().list()),
            "llm": {"provider": container.llm_provider, "configured": llm_configured},
        }

    # Documents

    @app.post("/documents", status_code=201)
    def upload_document(file: UploadFile = File(...)) -> Dict[str, Any]:
        max_bytes = container.file_reader().max_bytes
        # one byte past the limit is enough for the reader to reject it
        data = file.file.read() if max_bytes is None else file.file.read(max_bytes + 1)
        document = container.ingestion_service().ingest_bytes(
            data, file.filename or "", file.content_type or ""
        )
        return document.summary()

    @app.get("/documents")
    def list_documents() -> List[Dict[str, Any]]:
        return [doc.summary() for doc in container.ingestion_service().list()]

    @app.get("/documents/{document_id}")
    def get_document(document_id: int) -> Dict[str, Any]:
        document = container.ingestion_service().get(document_id)
        if document is None:
            raise DocumentNotFoundError(
                message=f"Document {document_id} not found",
                details={"document_id": document_id}
            )
        return document.to_dict()

    @app.delete("/documents/{document_id}")
    def delete_document(document_id: int) -> Dict[str, Any]:
        if not container.ingestion_service().delete(document_id):
            raise DocumentNotFoundError(
                message=f"Document {document_id} not found",
                details={"document_id": document_id}
            )
        return {"deleted": document_id}

    # Research

    @app.post("/research/search")
    def search(req: SearchRequest) -> Dict[str, Any]:
        preview = req.query if len(req.query) <= 50 else req.query[:50] + "..."
        logger.info(f"Search request: {preview} (documents={req.documentIds})")
        return container.research_use_case().search(req.query, req.documentIds)

    @app.post("/research/ask")
    def ask(req: AskRequest) -> Dict[str, Any]:
        try:
            results = container.answer_service().ask(req.query, req.documentId)
        except ResearchAssistantError:
            raise
        except Exception as e:
            log_error(e, "Unexpected error in ask endpoint", {"document_id": req.documentId})
            raise HTTPException(
                status_code=500,
                detail={
                    "error": "InternalServerError",
                    "message": "An unexpected error occurred while processing your request"
                }
            )
        return {"results": [r.to_dict() for r in results]}

    # Reports

    @app.post("/reports", status_code=201)
    def create_report(req: ReportRequest) -> Dict[str, Any]:
        results = [SearchResult.from_dict(r.model_dump()) for r in req.results]
        report = container.research_use_case().create_report(req.query, results, title=req.title)
        return report.to_dict()

    @app.get("/reports")
    def list_reports(q: Optional[str] = Query(None, description="Filter by title or query text")) -> List[Dict[str, Any]]:
        service = container.report_service()
        reports = service.search(q) if q else service.list()
        return [r.to_dict() for r in reports]

    @app.get("/reports/{report_id}")
    def get_report(report_id: int) -> Dict[str, Any]:
        return container.report_service().get(report_id).to_dict()

    @app.get("/reports/{report_id}/export", response_class=PlainTextResponse)
    def export_report(report_id: int) -> str:
        return container.report_service().export_markdown(report_id)

    @app.delete("/reports/{report_id}")
    def delete_report(report_id: int) -> Dict[str, Any]:
        if not container.report_service().delete(report_id):
            raise ReportError(
                message=f"Report {report_id} not found",
                error_code="ReportNotFound",
                details={"report_id": report_id}
            )
        return {"deleted": report_id}

    # Billing

    @app.get("/billing")
    def billing() -> Dict[str, Any]:
        ledger = container.billing_service()
        return {
            "credits": ledger.balance,
            "usage": ledger.usage().to_dict(),
            "history": [t.to_dict() for t in ledger.history()],
        }

    @app.post("/billing/credits")
    def add_credits(req: CreditsRequest) -> Dict[str, int]:
        return {"credits": container.billing_service().add_credits(req.amount, req.description)}

    @app.get("/")
    def root() -> Dict[str, Any]:
        return {
            "name": "Research Assistant API",
            "endpoints": [
                "POST /documents", "GET /documents", "GET /documents/{id}", "DELETE /documents/{id}",
                "POST /research/search", "POST /research/ask",
                "POST /reports", "GET /reports", "GET /reports/{id}", "GET /reports/{id}/export",
                "DELETE /reports/{id}", "GET /billing", "POST /billing/credits", "GET /health", "GET /info",
            ],
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("research_assistant.api:app", host=API_HOST, port=API_PORT, reload=True)
