"""Core module exports."""

from .abstractions import DatasetParser, InputSource
from .columns import (
    ALL_YEARS,
    ImportFilters,
    SourceColumn,
    SourceColumnMapping,
    SourceDataType,
    column_mapping_from_config,
)
from .errors import (
    ErrorKind,
    MalformedInputError,
    NotFoundError,
    StreamStateError,
    UnsupportedFormatError,
    WalesDataStreamError,
)

__all__ = [
    'DatasetParser',
    'InputSource',
    'ALL_YEARS',
    'ImportFilters',
    'SourceColumn',
    'SourceColumnMapping',
    'SourceDataType',
    'column_mapping_from_config',
    'ErrorKind',
    'MalformedInputError',
    'NotFoundError',
    'StreamStateError',
    'UnsupportedFormatError',
    'WalesDataStreamError',
]
