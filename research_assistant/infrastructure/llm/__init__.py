"""LLM infrastructure module."""

from .gemini_client import GeminiLLMClient
from .openai_client import OpenAILLMClient

__all__ = ['GeminiLLMClient', 'OpenAILLMClient']
