"""
Byte source and line reader for the dump driver.
"""

import io
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from .exceptions import DumpIOError

logger = logging.getLogger(__name__)

SKIP_CHUNK = 64 * 1024


class ByteSource:
    """Sequential byte source with an optional known total length."""

    def __init__(self, stream: BinaryIO, length: Optional[int] = None,
                 name: str = "<stream>", owns_stream: bool = False):
        """
        Initialize byte source.

        Args:
            stream: binary stream to read from
            length: total length in bytes, or None if unknown
            name: label used in log and error messages
            owns_stream: close the stream on exit
        """
        self.stream = stream
        self.length = length
        self.name = name
        self.owns_stream = owns_stream

    @classmethod
    def from_path(cls, file_path: Path) -> "ByteSource":
        """Open a file; its size becomes the known length."""
        file_path = Path(file_path)
        try:
            stream = open(file_path, 'rb')
        except OSError as e:
            raise DumpIOError("Open", f"{file_path}: {e.strerror or e}") from e
        try:
            length = os.fstat(stream.fileno()).st_size
        except OSError as e:
            stream.close()
            raise DumpIOError("Stat", f"{file_path}: {e.strerror or e}") from e
        logger.debug("Opened %s, %d bytes", file_path, length)
        return cls(stream, length, name=str(file_path), owns_stream=True)

    @classmethod
    def from_string(cls, text: str) -> "ByteSource":
        """In-memory source over the UTF-8 encoding of text."""
        data = text.encode('utf-8')
        return cls(io.BytesIO(data), len(data), name="<string>", owns_stream=True)

    @classmethod
    def from_stdin(cls) -> "ByteSource":
        """Standard input; length is unknown."""
        return cls(sys.stdin.buffer, None, name="<stdin>")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self):
        if self.owns_stream and not self.stream.closed:
            self.stream.close()

    def _seekable(self) -> bool:
        try:
            return self.stream.seekable()
        except (AttributeError, ValueError):
            return False

    def skip_to(self, offset: int) -> None:
        """Position the source at offset before the first read.

        Non-seekable streams (pipes) are advanced by reading and
        discarding bytes.
        """
        if offset <= 0:
            return
        try:
            if self._seekable():
                self.stream.seek(offset, io.SEEK_SET)
                return
            remaining = offset
            while remaining > 0:
                data = self.stream.read(min(remaining, SKIP_CHUNK))
                if not data:
                    break
                remaining -= len(data)
        except OSError as e:
            raise DumpIOError("Seek", f"{self.name}: {e.strerror or e}") from e
        logger.debug("Skipped to offset %d in %s", offset, self.name)

    def read_line(self, count: int) -> Tuple[bytes, int]:
        """
        Read up to count bytes for one output line.

        Short reads are retried until count bytes are gathered or the
        stream is exhausted.

        Returns:
            (data, actual_length); actual_length 0 means end of input
        """
        chunks = []
        gathered = 0
        try:
            while gathered < count:
                data = self.stream.read(count - gathered)
                if not data:
                    break
                chunks.append(data)
                gathered += len(data)
        except OSError as e:
            raise DumpIOError("Read", f"{self.name}: {e.strerror or e}") from e
        return b''.join(chunks), gathered

    def read_all(self) -> bytes:
        """Read the remainder of the source."""
        try:
            return self.stream.read()
        except OSError as e:
            raise DumpIOError("ReadAll", f"{self.name}: {e.strerror or e}") from e
