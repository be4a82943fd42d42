"""Input source exports."""

from .file_source import InputFile

__all__ = ['InputFile']
