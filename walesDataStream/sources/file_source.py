"""
File-backed input source.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from ..core.abstractions import InputSource
from ..core.errors import StreamStateError


class InputFile(InputSource):
    """Source data contained within a file on disk."""

    def __init__(self, file_path: Union[str, Path], encoding: str = 'utf-8-sig'):
        super().__init__(str(file_path))
        self.encoding = encoding
        self._stream: Optional[TextIO] = None

    def open(self) -> TextIO:
        """
        Open the file and return the text stream.

        Raises:
            StreamStateError: if the file cannot be opened
        """
        try:
            self._stream = open(self.source, 'r', encoding=self.encoding, newline='')
        except OSError as e:
            raise StreamStateError(f"InputFile.open: Failed to open file {self.source} ({e})")
        return self._stream

    def close(self):
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> TextIO:
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
