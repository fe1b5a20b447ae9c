"""
Dump driver: pulls one line of bytes at a time and writes rendered lines.
"""

import enum
import logging
from typing import Iterator, TextIO

from .binary_reader import ByteSource
from .canonical import canonical_dump
from .config import DumpConfiguration
from .offsets import compute_width
from .renderer import AlignmentState, LineRenderer

logger = logging.getLogger(__name__)


class DumpState(enum.Enum):
    NOT_STARTED = "not-started"
    READING = "reading"
    DONE = "done"


class Dumper:
    """Runs a dump of one byte source with one configuration."""

    def __init__(self, config: DumpConfiguration, source: ByteSource):
        """
        Initialize dumper.

        Raises ConfigurationError before anything is read if the
        configuration is invalid.

        Args:
            config: layout and boundary settings
            source: byte source, positioned at offset 0
        """
        self.config = config.validate()
        self.source = source
        self.width = compute_width(source.length, config.min_off_len)
        self.renderer = LineRenderer(config, self.width)
        self.state = DumpState.NOT_STARTED
        logger.debug("Offset field width: %d", self.width)

    def requested_length(self, offset: int) -> int:
        """Bytes to request for the line at offset; the end offset is inclusive."""
        off_end = self.config.off_end
        if off_end is not None and offset + self.config.line_len > off_end:
            return off_end - offset + 1
        return self.config.line_len

    def lines(self) -> Iterator[str]:
        """Yield rendered lines, without terminators."""
        if self.state is not DumpState.NOT_STARTED:
            raise RuntimeError("Dump already run.")
        self.source.skip_to(self.config.off_begin)
        offset = self.config.off_begin
        alignment = AlignmentState()
        self.state = DumpState.READING

        while self.state is DumpState.READING:
            read_len = self.requested_length(offset)
            chunk, actual = self.source.read_line(read_len)
            if actual == 0:
                self.state = DumpState.DONE
                break
            line, alignment = self.renderer.render(offset, chunk, actual, alignment)
            yield line
            offset += self.config.line_len
            if self.config.off_end is not None and offset > self.config.off_end:
                self.state = DumpState.DONE

    def run(self, out: TextIO) -> int:
        """Write every line to out; return the number of lines written."""
        count = 0
        for line in self.lines():
            out.write(line + "\n")
            count += 1
        logger.debug("Wrote %d lines", count)
        return count

    def canonical(self, out: TextIO) -> int:
        """Write the canonical dump from the begin offset; return bytes dumped."""
        if self.state is not DumpState.NOT_STARTED:
            raise RuntimeError("Dump already run.")
        self.source.skip_to(self.config.off_begin)
        data = self.source.read_all()
        self.state = DumpState.DONE
        out.write(canonical_dump(data))
        return len(data)
