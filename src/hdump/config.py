"""
Dump layout configuration.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

OFF_LEN = 6  # Default width of the offset field


@dataclass(frozen=True)
class DumpConfiguration:
    """Settings shared by the reader, renderer and driver.

    Attributes:
        line_len: bytes per output line
        inner_len: bytes per hex sub-group
        min_off_len: minimum offset field width (None or <= 0 = computed)
        upper: upper case hex digits
        edge_mark: character printed before and after the character panel
        off_begin: first offset to dump
        off_end: last offset to dump, inclusive (None = to end of input)
        clean: blank out invalid UTF-8 in the character panel
    """

    line_len: int = 16
    inner_len: int = 4
    min_off_len: Optional[int] = None
    upper: bool = False
    edge_mark: str = "|"
    off_begin: int = 0
    off_end: Optional[int] = None
    clean: bool = False

    def validate(self) -> "DumpConfiguration":
        """Raise ConfigurationError if the settings cannot produce a dump."""
        if self.line_len <= 0:
            raise ConfigurationError(
                f"Layout Error: lineLen({self.line_len}) must be > 0")
        if self.inner_len <= 0:
            raise ConfigurationError(
                f"Layout Error: innerLen({self.inner_len}) must be > 0")
        if len(self.edge_mark) != 1:
            raise ConfigurationError(
                f"Layout Error: edgeMark({self.edge_mark!r}) must be a single character")
        if self.off_begin < 0:
            raise ConfigurationError(
                f"Offset Error: offBegin({self.off_begin}) must be >= 0")
        if self.off_end is not None and self.off_end <= self.off_begin:
            raise ConfigurationError(
                f"Offset Error: offEnd({self.off_end}) must be > "
                f"offBegin({self.off_begin})")
        return self

    @property
    def hex_format(self) -> str:
        return "X" if self.upper else "x"
