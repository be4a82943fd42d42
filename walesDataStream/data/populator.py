"""
Dataset population dispatcher.

This module hands an input stream to the parser registered for its source
data type, after checking the stream can actually be read.
"""

import io
import logging
from typing import Dict, Optional, TextIO, Union

from ..core.abstractions import DatasetParser
from ..core.columns import ImportFilters, SourceColumnMapping, SourceDataType
from ..core.errors import StreamStateError, UnsupportedFormatError
from ..models.areas import Areas
from ..parsers.authority_by_year_csv import AuthorityByYearCSVParser
from ..parsers.authority_code_csv import AuthorityCodeCSVParser
from ..parsers.welsh_stats_json import WelshStatsJSONParser


class DataPopulator:
    """Dispatches streams to the parser for their source data type."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

        # Registry of source parsers
        self._parsers: Dict[SourceDataType, DatasetParser] = {}
        self._register_default_parsers()

    def _register_default_parsers(self):
        """Register the parsers for the three known file layouts."""
        for parser in (AuthorityCodeCSVParser(self.logger),
                       AuthorityByYearCSVParser(self.logger),
                       WelshStatsJSONParser(self.logger)):
            self._parsers[parser.get_source_type()] = parser

    def register_parser(self, parser: DatasetParser):
        """Register a new parser, replacing any for the same source type."""
        self._parsers[parser.get_source_type()] = parser

    def populate(self,
                 areas: Areas,
                 stream: TextIO,
                 source_type: Union[SourceDataType, str],
                 cols: SourceColumnMapping,
                 filters: Optional[ImportFilters] = None) -> None:
        """
        Parse a stream of the given type into areas.

        Args:
            areas: Collection to populate
            stream: Readable text stream positioned at the header line
            source_type: SourceDataType (or its string value) of the stream
            cols: Column mapping for this source
            filters: Area, measure and year filters; None imports everything

        Raises:
            StreamStateError: if the stream is closed, unreadable or empty
            UnsupportedFormatError: if no parser handles source_type

        Neither of these is raised after the collection has been modified.
        """
        content = self._read_stream(stream)
        parser = self._parser_for(source_type)

        if filters is None:
            filters = ImportFilters()

        self.logger.debug(
            f"Dispatching to {type(parser).__name__} "
            f"(areas={sorted(filters.areas)}, measures={sorted(filters.measures)}, years={filters.years})"
        )
        parser.parse(io.StringIO(content), cols, areas, filters)

    def _read_stream(self, stream: Optional[TextIO]) -> str:
        if stream is None or getattr(stream, 'closed', False):
            raise StreamStateError("Input stream is not open or not in a valid state")
        try:
            readable = stream.readable()
        except (OSError, ValueError):
            readable = False
        if not readable:
            raise StreamStateError("Input stream is not open or not in a valid state")

        try:
            content = stream.read()
        except (OSError, ValueError) as e:
            raise StreamStateError(f"Input stream could not be read: {e}")

        # StatsWales exports may start with a UTF-8 byte order mark
        if content.startswith("\ufeff"):
            content = content[1:]
        if not content:
            raise StreamStateError("Input stream is empty")
        return content

    def _parser_for(self, source_type: Union[SourceDataType, str]) -> DatasetParser:
        if not isinstance(source_type, SourceDataType):
            try:
                source_type = SourceDataType(str(source_type).lower())
            except ValueError:
                raise UnsupportedFormatError(f"Unexpected data type: {source_type}")

        parser = self._parsers.get(source_type)
        if parser is None:
            raise UnsupportedFormatError(f"No parser registered for data type: {source_type.value}")
        return parser
