"""
Core abstractions for the Wales Data Stream pipeline.

This module defines the abstract base classes that input sources and
format-specific parsers must implement.
"""

from abc import ABC, abstractmethod
from typing import TextIO, TYPE_CHECKING

from .columns import ImportFilters, SourceColumnMapping, SourceDataType

if TYPE_CHECKING:
    from ..models.areas import Areas


class InputSource(ABC):
    """Abstract base class for anything that can produce a character stream."""

    def __init__(self, source: str):
        self.source = source

    def get_source(self) -> str:
        """Return the identifier (e.g. the path) of this source."""
        return self.source

    @abstractmethod
    def open(self) -> TextIO:
        """Open the source and return a readable text stream."""
        pass


class DatasetParser(ABC):
    """Abstract base class for source-format parsers."""

    @abstractmethod
    def parse(self,
              stream: TextIO,
              cols: SourceColumnMapping,
              areas: 'Areas',
              filters: ImportFilters) -> None:
        """Read the stream and merge its contents into areas."""
        pass

    @abstractmethod
    def get_source_type(self) -> SourceDataType:
        """Return the source data type this parser handles."""
        pass
