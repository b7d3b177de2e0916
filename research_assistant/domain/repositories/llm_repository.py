"""Abstract LLM repository interface."""

from abc import ABC, abstractmethod


class LLMRepository(ABC):
    """Abstract interface for LLM operations."""

    #: Display name used in titles and citations of LLM answers.
    name: str = "LLM"

    @abstractmethod
    def generate_answer(self, prompt: str, **kwargs) -> str:
        """Generate an answer using the LLM."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the LLM is configured and reachable."""
        pass
