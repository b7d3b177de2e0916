"""Application use cases."""

from .research_use_case import ResearchUseCase

__all__ = ['ResearchUseCase']
