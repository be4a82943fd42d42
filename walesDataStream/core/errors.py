"""
Error taxonomy for the Wales Data Stream pipeline.

Every error raised by the library derives from WalesDataStreamError and
carries an ErrorKind so callers that collect per-dataset results can report
what went wrong without matching on exception classes.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a dataset import can end with."""

    NOT_FOUND = "not_found"
    MALFORMED_INPUT = "malformed_input"
    UNSUPPORTED_FORMAT = "unsupported_format"
    STREAM_STATE = "stream_state"


class WalesDataStreamError(Exception):
    """Base class for all pipeline errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(WalesDataStreamError, KeyError):
    """A lookup missed: language, measure, year or area."""

    kind = ErrorKind.NOT_FOUND


class MalformedInputError(WalesDataStreamError, ValueError):
    """A row or record could not be parsed."""

    kind = ErrorKind.MALFORMED_INPUT


class UnsupportedFormatError(WalesDataStreamError):
    """The dispatcher was given a source type it has no parser for."""

    kind = ErrorKind.UNSUPPORTED_FORMAT


class StreamStateError(WalesDataStreamError, OSError):
    """The input stream is closed, unreadable or empty."""

    kind = ErrorKind.STREAM_STATE
