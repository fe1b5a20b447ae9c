"""
hdump - dump a byte stream as offset, grouped hex and character panel lines.
"""

from .config import DumpConfiguration, OFF_LEN
from .exceptions import DumpError, ConfigurationError, DumpIOError
from .offsets import compute_width
from .binary_reader import ByteSource
from .renderer import AlignmentState, LineRenderer
from .dumper import Dumper, DumpState
from .canonical import canonical_dump

__version__ = "1.0.2"

__all__ = [
    "DumpConfiguration",
    "OFF_LEN",
    "DumpError",
    "ConfigurationError",
    "DumpIOError",
    "compute_width",
    "ByteSource",
    "AlignmentState",
    "LineRenderer",
    "Dumper",
    "DumpState",
    "canonical_dump",
    "__version__",
]
