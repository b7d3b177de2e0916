"""OpenAI LLM implementation."""

from typing import Optional

import openai

from ...config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_MAX_TOKENS, OPENAI_TEMPERATURE
from ...domain.repositories import LLMRepository
from ...exceptions import LLMError
from ...error_handler import handle_errors


class OpenAILLMClient(LLMRepository):
    """OpenAI implementation of LLMRepository."""

    name = "OpenAI"

    def __init__(self, api_key: Optional[str] = OPENAI_API_KEY, model: str = OPENAI_MODEL):
        self.api_key = api_key
        self.model = model
        self.max_tokens = OPENAI_MAX_TOKENS
        self.temperature = OPENAI_TEMPERATURE
        self._client = openai.OpenAI(api_key=api_key) if api_key else None

    def is_available(self) -> bool:
        return self._client is not None

    @handle_errors(exception_type=LLMError)
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Generate an answer using OpenAI chat completions."""
        if not self.is_available():
            raise LLMError(message="Missing OpenAI API key")

        system_message = {
            "role": "system",
            "content": "You are a research assistant. Answer the question using the provided document."
        }
        user_message = {"role": "user", "content": prompt}

        response = self._client.chat.completions.create(
            model=self.model,
            messages=[system_message, user_message],
            max_tokens=kwargs.get('max_tokens', self.max_tokens),
            temperature=kwargs.get('temperature', self.temperature)
        )

        return response.choices[0].message.content or ""
