"""Infrastructure layer module."""

from . import llm
from . import readers
from . import storage

__all__ = ['llm', 'readers', 'storage']
