"""
Wales Data Stream - Import pipeline for Welsh Government statistics.

This package reads StatsWales datasets in several file formats (authority
code tables, authority-by-year tables and JSON exports), merges them into a
single hierarchy of areas and their yearly measures, and writes the result
as text tables or JSON.
"""

# Core abstractions
from .core.abstractions import DatasetParser, InputSource
from .core.columns import ImportFilters, SourceColumn, SourceDataType
from .core.errors import (
    ErrorKind,
    MalformedInputError,
    NotFoundError,
    StreamStateError,
    UnsupportedFormatError,
    WalesDataStreamError,
)

# Data model
from .models.measure import Measure
from .models.area import Area
from .models.areas import Areas

# Parsers
from .parsers.authority_code_csv import AuthorityCodeCSVParser
from .parsers.authority_by_year_csv import AuthorityByYearCSVParser
from .parsers.welsh_stats_json import WelshStatsJSONParser

# Input sources
from .sources.file_source import InputFile

# Data orchestration
from .data.catalogue import DatasetCatalogue, DatasetSource
from .data.populator import DataPopulator
from .data.repository import DataRepository, DatasetLoadResult

__version__ = "1.0.0"

# Public API - main classes that users will interact with
__all__ = [
    # Main entry points
    'DataRepository',
    'DataPopulator',
    'DatasetCatalogue',
    'DatasetSource',
    'DatasetLoadResult',

    # Data model
    'Measure',
    'Area',
    'Areas',

    # Configuration types
    'ImportFilters',
    'SourceColumn',
    'SourceDataType',

    # Abstract base classes (for extending)
    'DatasetParser',
    'InputSource',

    # Concrete implementations
    'AuthorityCodeCSVParser',
    'AuthorityByYearCSVParser',
    'WelshStatsJSONParser',
    'InputFile',

    # Errors
    'ErrorKind',
    'WalesDataStreamError',
    'NotFoundError',
    'MalformedInputError',
    'UnsupportedFormatError',
    'StreamStateError',
]
