"""Gemini LLM implementation."""

from typing import Optional

import requests

from ...config import GEMINI_API_KEY, GEMINI_API_URL, GEMINI_TIMEOUT
from ...domain.repositories import LLMRepository
from ...exceptions import LLMError
from ...error_handler import handle_errors
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeminiLLMClient(LLMRepository):
    """Gemini ``generateContent`` implementation of LLMRepository."""

    name = "Gemini"

    def __init__(self,
                 api_key: Optional[str] = GEMINI_API_KEY,
                 api_url: str = GEMINI_API_URL,
                 timeout: float = GEMINI_TIMEOUT):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def is_available(self) -> bool:
        return bool(self.api_key)

    @handle_errors(exception_type=LLMError)
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Send a single-turn prompt and return the first candidate's text."""
        if not self.api_key:
            raise LLMError(message="Missing Gemini API key")

        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            response = requests.post(
                self.api_url,
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=kwargs.get("timeout", self.timeout),
            )
        except requests.exceptions.RequestException as e:
            raise LLMError(
                message=f"Network error calling Gemini: {str(e)}",
                details={"error": str(e)}
            ) from e

        if response.status_code != 200:
            raise LLMError(
                message=f"Gemini API error: {response.status_code}",
                details={"status_code": response.status_code, "response": response.text[:500]}
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError(
                message=f"Invalid JSON response from Gemini: {str(e)}",
                details={"error": str(e)}
            ) from e

        candidates = data.get("candidates") or [{}]
        parts = candidates[0].get("content", {}).get("parts") or [{}]
        return parts[0].get("text", "")
