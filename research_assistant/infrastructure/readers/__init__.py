"""File reader infrastructure module."""

from .file_reader import FileReader, SUPPORTED_EXT

__all__ = ['FileReader', 'SUPPORTED_EXT']
