"""
Line renderer: offset field, grouped hex block and character panel.

A rendered line looks like (line_len 16, inner_len 4):

    000000  00010203 04050607 08090a0b 0c0d0e0f |................|
"""

import codecs
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import DumpConfiguration

BLANK_ERRORS = "hdump-blank"


def _blank_invalid(error: UnicodeDecodeError):
    return ' ' * (error.end - error.start), error.end


codecs.register_error(BLANK_ERRORS, _blank_invalid)

# Bytes below 0x20 and DEL print as '.'
_CONTROL_TABLE = bytes(
    0x2e if b < 0x20 or b == 0x7f else b for b in range(256)
)


@dataclass(frozen=True)
class AlignmentState:
    """Hex block widths carried from line to line.

    reference_width is fixed by the first full-length line and never
    changes afterwards. LineRenderer.hex_block renders every position up
    to line_len, so in a dump fill stays 0; it only guards against a
    narrower hex block.
    """

    reference_width: Optional[int] = None
    current_width: int = 0

    def observe(self, width: int, full: bool) -> "AlignmentState":
        reference = self.reference_width
        if reference is None and full:
            reference = width
        return AlignmentState(reference, width)

    @property
    def fill(self) -> int:
        if self.reference_width is None:
            return 0
        return max(0, self.reference_width - self.current_width)


class LineRenderer:
    """Formats one dump line at a time."""

    def __init__(self, config: DumpConfiguration, width: int):
        """
        Args:
            config: layout settings
            width: offset field width in digits
        """
        self.config = config
        self.width = width
        self._byte_fmt = "02" + config.hex_format
        self._errors = BLANK_ERRORS if config.clean else "replace"

    def offset_field(self, offset: int) -> str:
        return f"{offset:0{self.width}{self.config.hex_format}}  "

    def hex_block(self, chunk: bytes, actual: int) -> str:
        """Hex digits for the first actual bytes, blanks for the rest of the line."""
        line_len = self.config.line_len
        inner_len = self.config.inner_len
        parts = []
        for group in range(0, line_len, inner_len):
            for pos in range(group, min(group + inner_len, line_len)):
                if pos < actual:
                    parts.append(format(chunk[pos], self._byte_fmt))
                else:
                    parts.append("  ")
            parts.append(" ")
        return "".join(parts)

    def char_block(self, chunk: bytes, actual: int) -> str:
        text = chunk[:actual].translate(_CONTROL_TABLE).decode('utf-8', self._errors)
        return text + self.config.edge_mark

    def render(self, offset: int, chunk: bytes, actual: int,
               state: AlignmentState) -> Tuple[str, AlignmentState]:
        """
        Render one line.

        Args:
            offset: offset of the first byte in the line
            chunk: bytes read for the line
            actual: number of valid bytes in chunk
            state: alignment state from the previous line

        Returns:
            (line text without terminator, updated alignment state)
        """
        hex_text = self.hex_block(chunk, actual)
        state = state.observe(len(hex_text), actual >= self.config.line_len)
        return (
            self.offset_field(offset)
            + hex_text
            + " " * state.fill
            + self.config.edge_mark
            + self.char_block(chunk, actual),
            state,
        )
