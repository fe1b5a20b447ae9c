#!/usr/bin/env python3
"""
Command-line interface for the hex dump tool.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .binary_reader import ByteSource
from .config import DumpConfiguration
from .dumper import Dumper
from .exceptions import DumpError
from .log import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hd', description='Dump a file in hex')
    parser.add_argument('file', nargs='?', type=Path, help='File to dump (default: stdin)')
    parser.add_argument('--in-file', type=Path, default=None,
                        help='Input file name; takes precedence over the positional file')
    parser.add_argument('--in-string', default=None, help='Dump this string instead of a file')
    parser.add_argument('--line-len', type=int, default=16,
                        help='Bytes per dump line (default: 16)')
    parser.add_argument('--inner-len', type=int, default=4,
                        help='Bytes per inner hex group (default: 4)')
    parser.add_argument('--min-off-len', type=int, default=-1,
                        help='Minimum width of the offset field (default: computed)')
    parser.add_argument('--off-begin', type=int, default=0,
                        help='Begin dump at this offset (default: 0)')
    parser.add_argument('--off-end', type=int, default=None,
                        help='End dump at this offset, inclusive (default: end of input)')
    parser.add_argument('--upper', action='store_true', help='Upper case hex')
    parser.add_argument('--edge-mark', default='|',
                        help='Marker at the edges of the character block (default: |)')
    parser.add_argument('--canonical', action='store_true',
                        help='Use the fixed 16 bytes per line canonical format')
    parser.add_argument('--clean', action='store_true',
                        help='Blank out invalid UTF-8 in the character block')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress start/end banners')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    parser.add_argument('--version', action='version', version=f'hd Version: {__version__}')
    return parser


def open_source(args) -> ByteSource:
    """Pick the byte source: string, then --in-file, then positional file, then stdin."""
    if args.in_string:
        return ByteSource.from_string(args.in_string)
    if args.in_file is not None:
        return ByteSource.from_path(args.in_file)
    if args.file is not None:
        return ByteSource.from_path(args.file)
    return ByteSource.from_stdin()


def config_from_args(args) -> DumpConfiguration:
    return DumpConfiguration(
        line_len=args.line_len,
        inner_len=args.inner_len,
        min_off_len=args.min_off_len if args.min_off_len > 0 else None,
        upper=args.upper,
        edge_mark=args.edge_mark,
        off_begin=args.off_begin,
        off_end=args.off_end,
        clean=args.clean,
    )


def silence_stdout(out) -> None:
    """Point stdout's descriptor at devnull so the final flush at exit does not fail."""
    try:
        fd = out.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    out = sys.stdout

    try:
        config = config_from_args(args).validate()
    except DumpError as e:
        logger.error(str(e))
        return e.exit_code

    try:
        if not args.quiet:
            print("DumpFile Starts....", file=out)
        with open_source(args) as source:
            dumper = Dumper(config, source)
            if args.canonical:
                dumper.canonical(out)
            else:
                dumper.run(out)
        if not args.quiet:
            print("DumpFile Ends....", file=out)
        out.flush()
    except BrokenPipeError:
        # Reader went away (hd file | head)
        logger.debug("Output closed by reader")
        silence_stdout(out)
        return 1
    except DumpError as e:
        logger.error(str(e))
        if not args.quiet:
            print(f"DumpFile Ends, RC: {e.exit_code}", file=out)
        return e.exit_code

    return 0


if __name__ == '__main__':
    sys.exit(main())
